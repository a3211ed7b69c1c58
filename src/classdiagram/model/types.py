# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptor records consumed by the diagram model and encoder."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Visibility(Enum):
    """Declared visibility of a class member."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    OTHER = "other"


class AttributeDef(BaseModel):
    """A declared attribute: name, declared type name, and visibility."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    visibility: Visibility = Visibility.PUBLIC


class BehaviorDef(BaseModel):
    """A declared behavior (method) and the name of its return type.

    An empty ``returns`` means the return type is unknown.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    returns: str = ""


class TypeDef(BaseModel):
    """A hand-written description of a type.

    ``name`` is the qualified name (dotted, e.g. ``zoo.animals.Dog``) and
    ``superclass`` the qualified name of the parent type, if any.
    """

    name: str
    superclass: str | None = None
    attributes: list[AttributeDef] = _Field(default_factory=list)
    behaviors: list[BehaviorDef] = _Field(default_factory=list)
