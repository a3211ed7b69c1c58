# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagram model: type descriptors, relationships, notes, and the diagram itself."""

from classdiagram.model.diagram import DiagramModel, NamePolicy
from classdiagram.model.notes import Note, NoteSet
from classdiagram.model.relationships import (
    Connector,
    ModelInconsistencyError,
    Relationship,
    RelationshipGraph,
    RelationshipKind,
    RelationshipOrigin,
)
from classdiagram.model.types import AttributeDef, BehaviorDef, TypeDef, Visibility

__all__ = [
    # Type descriptors
    "Visibility",
    "AttributeDef",
    "BehaviorDef",
    "TypeDef",
    # Relationships
    "RelationshipKind",
    "RelationshipOrigin",
    "Connector",
    "Relationship",
    "RelationshipGraph",
    "ModelInconsistencyError",
    # Notes
    "Note",
    "NoteSet",
    # Diagram
    "NamePolicy",
    "DiagramModel",
]
