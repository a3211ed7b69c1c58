# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""The diagram model: registered types, relationships, notes and naming policy.

Relationships and notes are stored under the types' qualified names. The
active :class:`NamePolicy` is applied only when a name is displayed, so a
type renders under the same name everywhere in one diagram, however late the
policy was changed.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from classdiagram.model.notes import NoteSet
from classdiagram.model.relationships import Relationship, RelationshipGraph, RelationshipKind

if TYPE_CHECKING:
    from classdiagram.introspection.provider import TypeMetadataProvider

# ###############
# Public Interface
# ###############


class NamePolicy(Enum):
    """How type names are displayed."""

    SIMPLE = "simple"
    QUALIFIED = "qualified"

    def apply(self, qualified_name: str) -> str:
        """Return *qualified_name* as displayed under this policy."""
        if self is NamePolicy.QUALIFIED:
            return qualified_name
        return qualified_name.rsplit(".", 1)[-1]


class DiagramModel:
    """Incrementally built description of one class diagram.

    Args:
        title: Diagram title.
        types: Type handles to register, in order.
        provider: Source of type metadata. Defaults to :class:`PythonTypeProvider`.
        policy: Initial naming policy.
        strict: Raise on unrecognized relationship kinds instead of rendering
            them with an empty connector.
    """

    def __init__(
        self,
        title: str = "",
        types: tuple[Any, ...] | list[Any] = (),
        *,
        provider: TypeMetadataProvider | None = None,
        policy: NamePolicy = NamePolicy.SIMPLE,
        strict: bool = False,
    ) -> None:
        self.title = title
        self.policy = policy
        if provider is None:
            from classdiagram.introspection.provider import PythonTypeProvider

            provider = PythonTypeProvider()
        self.provider: TypeMetadataProvider = provider
        self._types: list[Any] = []
        self._relationships = RelationshipGraph(strict=strict)
        self._notes = NoteSet()
        self.add_types(*types)

    @property
    def strict(self) -> bool:
        return self._relationships.strict

    @property
    def types(self) -> list[Any]:
        """Registered type handles, in registration order."""
        return list(self._types)

    @property
    def relationships(self) -> RelationshipGraph:
        return self._relationships

    @property
    def notes(self) -> NoteSet:
        return self._notes

    def add_type(self, handle: Any) -> None:
        """Register a type. Registering the same type twice has no effect."""
        if handle not in self._types:
            self._types.append(handle)

    def add_types(self, *handles: Any) -> None:
        for handle in handles:
            self.add_type(handle)

    def set_title(self, title: str) -> None:
        self.title = title

    def include_packages(self, include: bool) -> None:
        """Show qualified names when *include* is true, simple names otherwise."""
        self.policy = NamePolicy.QUALIFIED if include else NamePolicy.SIMPLE

    def key(self, handle: Any) -> str:
        """Return the policy-independent key under which *handle* is stored.

        A string naming a registered type, by its qualified name or by its
        simple display name, resolves to that type's qualified name. Other
        strings, including simple names shared by several registered types,
        are taken as already-qualified names.
        """
        if not isinstance(handle, str):
            return self.provider.qualified_name(handle)
        registered = [self.provider.qualified_name(t) for t in self._types]
        if handle in registered:
            return handle
        matches = [name for name in registered if NamePolicy.SIMPLE.apply(name) == handle]
        return matches[0] if len(matches) == 1 else handle

    def display_name(self, handle: Any) -> str:
        """Return the name *handle* is rendered under with the active policy."""
        return self.policy.apply(self.key(handle))

    def add_relationship(self, source: Any, target: Any, kind: RelationshipKind | str | None = None) -> Relationship:
        """Declare a relationship; see :meth:`RelationshipGraph.declare`."""
        return self._relationships.declare(self.key(source), self.key(target), kind)

    def set_line_style(self, source: Any, target: Any, style: str) -> Relationship:
        """Style a declared relationship; see :meth:`RelationshipGraph.set_line_style`."""
        return self._relationships.set_line_style(self.key(source), self.key(target), style)

    def add_note(self, text: str, *targets: Any) -> str:
        """Add a note, attached to *targets* when any are given. Returns the note id."""
        if not targets:
            return self._notes.add_free_note(text)
        return self._notes.add_attached_note(text, *(self.key(target) for target in targets))

    def encode(self) -> str:
        """Render the model to a PlantUML class-diagram description."""
        from classdiagram.views.encoder import encode_diagram

        return encode_diagram(self)
