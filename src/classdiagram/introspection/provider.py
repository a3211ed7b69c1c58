# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type metadata providers.

The diagram model never inspects types itself. It asks a provider for a
type's qualified name, superclass, attributes and behaviors. Two providers
are available:

- :class:`PythonTypeProvider` reads live Python classes.
- :class:`DescriptorProvider` serves hand-written :class:`TypeDef` records,
  for example loaded from a diagram definition file.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from classdiagram.model.types import AttributeDef, BehaviorDef, TypeDef, Visibility

# ###############
# Public Interface
# ###############


@runtime_checkable
class TypeMetadataProvider(Protocol):
    """Capability that describes the types placed on a diagram."""

    def qualified_name(self, handle: Any) -> str: ...

    def superclass(self, handle: Any) -> Any | None: ...

    def is_root(self, handle: Any) -> bool: ...

    def attributes(self, handle: Any) -> Sequence[AttributeDef]: ...

    def behaviors(self, handle: Any) -> Sequence[BehaviorDef]: ...


class PythonTypeProvider:
    """Describe live Python classes.

    Attributes are the annotations declared in the class body itself, in
    declaration order. Behaviors are the functions, static methods and class
    methods defined in the class body; dunder methods are skipped. Visibility
    follows the naming convention: ``__name`` is private, ``_name`` is
    protected, ``__name__`` is neither.
    """

    def qualified_name(self, handle: type) -> str:
        if handle.__module__ == "builtins":
            return handle.__qualname__
        return f"{handle.__module__}.{handle.__qualname__}"

    def superclass(self, handle: type) -> type | None:
        return getattr(handle, "__base__", None)

    def is_root(self, handle: type) -> bool:
        return handle is object

    def attributes(self, handle: type) -> list[AttributeDef]:
        attributes: list[AttributeDef] = []
        for raw_name, annotation in inspect.get_annotations(handle).items():
            name = _demangle(handle, raw_name)
            attributes.append(AttributeDef(name=name, type=_type_label(annotation), visibility=_visibility(name)))
        return attributes

    def behaviors(self, handle: type) -> list[BehaviorDef]:
        behaviors: list[BehaviorDef] = []
        for name, member in vars(handle).items():
            if _is_dunder(name):
                continue
            if isinstance(member, (staticmethod, classmethod)):
                member = member.__func__
            if not inspect.isfunction(member):
                continue
            returns = inspect.get_annotations(member).get("return", inspect.Signature.empty)
            label = "" if returns is inspect.Signature.empty else _type_label(returns)
            behaviors.append(BehaviorDef(name=_demangle(handle, name), returns=label))
        return behaviors


class DescriptorProvider:
    """Serve hand-written :class:`TypeDef` descriptors.

    Handles are either :class:`TypeDef` instances or their qualified names.
    A superclass name without a matching descriptor resolves to a bare
    :class:`TypeDef` of that name, so inheritance from types outside the
    diagram still renders. The root type is named ``object``.
    """

    ROOT_NAME = "object"

    def __init__(self, types: Iterable[TypeDef] = ()) -> None:
        self._types: dict[str, TypeDef] = {}
        for type_def in types:
            self.add(type_def)

    def add(self, type_def: TypeDef) -> TypeDef:
        """Register *type_def*, replacing any descriptor with the same name."""
        self._types[type_def.name] = type_def
        return type_def

    def get(self, name: str) -> TypeDef | None:
        """Return the descriptor registered under *name*, or None."""
        return self._types.get(name)

    def qualified_name(self, handle: TypeDef | str) -> str:
        return handle if isinstance(handle, str) else handle.name

    def superclass(self, handle: TypeDef | str) -> TypeDef | None:
        type_def = self._resolve(handle)
        if type_def is None or not type_def.superclass:
            return None
        return self._types.get(type_def.superclass) or TypeDef(name=type_def.superclass)

    def is_root(self, handle: TypeDef | str) -> bool:
        return self.qualified_name(handle) == self.ROOT_NAME

    def attributes(self, handle: TypeDef | str) -> list[AttributeDef]:
        type_def = self._resolve(handle)
        return list(type_def.attributes) if type_def else []

    def behaviors(self, handle: TypeDef | str) -> list[BehaviorDef]:
        type_def = self._resolve(handle)
        return list(type_def.behaviors) if type_def else []

    def _resolve(self, handle: TypeDef | str) -> TypeDef | None:
        if isinstance(handle, TypeDef):
            return handle
        return self._types.get(handle)


# ################
# Implementation
# ################


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__") and len(name) > 4


def _demangle(cls: type, name: str) -> str:
    """Undo private name mangling: ``_Owner__name`` becomes ``__name``."""
    prefix = f"_{cls.__name__.lstrip('_')}__"
    if name.startswith(prefix) and not name.endswith("__"):
        return name[len(prefix) - 2 :]
    return name


def _visibility(name: str) -> Visibility:
    """Derive a member's visibility from Python naming conventions."""
    if _is_dunder(name):
        return Visibility.OTHER
    if name.startswith("__"):
        return Visibility.PRIVATE
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def _type_label(annotation: object) -> str:
    """Return a short display label for a type annotation."""
    if isinstance(annotation, str):
        label = annotation
    elif isinstance(annotation, type) and not getattr(annotation, "__args__", None):
        label = annotation.__qualname__
    elif annotation is None:
        label = "None"
    else:
        label = repr(annotation)
    return label.replace("typing.", "")
