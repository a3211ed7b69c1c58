# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Relationships between diagram types and their connector tokens.

A relationship is stored once per ordered ``(source, target)`` pair, where
the source is the child or part and the target the parent or whole. The
rendered line lists the target before the source, because every connector
token carries its arrowhead on the left: ``Animal <|-- Dog`` reads as
"Dog extends Animal".
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import Enum

# ###############
# Public Interface
# ###############


class ModelInconsistencyError(Exception):
    """Raised when a diagram operation references state that does not exist."""


class RelationshipKind(Enum):
    """Kinds of relationships with a fixed connector arrowhead."""

    EXTENSION = "Extension"
    COMPOSITION = "Composition"
    AGGREGATION = "Aggregation"
    UNSPECIFIED = ""

    @classmethod
    def parse(cls, text: str, *, strict: bool = False) -> RelationshipKind:
        """Map a kind name such as ``"Composition"`` to a kind.

        Unknown names silently map to :attr:`UNSPECIFIED`, which renders as an
        empty connector token. With *strict* set, they raise instead.

        Raises:
            ModelInconsistencyError: If *strict* is set and *text* names no kind.
        """
        for kind in cls:
            if kind is not cls.UNSPECIFIED and kind.value.lower() == text.strip().lower():
                return kind
        if strict:
            raise ModelInconsistencyError(f"Unrecognized relationship kind: {text!r}")
        return cls.UNSPECIFIED


class RelationshipOrigin(Enum):
    """Whether a relationship was derived from a superclass or declared by the caller."""

    IMPLICIT = "implicit"
    EXPLICIT = "explicit"


@dataclass(frozen=True)
class Connector:
    """Arrowhead kind plus an optional line-style annotation.

    Attributes:
        kind: The relationship kind, which fixes the arrowhead glyph.
        style: Optional line style such as ``"dashed"`` or ``"#red"``.
    """

    kind: RelationshipKind
    style: str | None = None

    @property
    def token(self) -> str:
        """Return the connector text, e.g. ``" <|-- "`` or ``" <|-[dashed]- "``."""
        head = _ARROWHEADS[self.kind]
        if head is None:
            return ""
        bracket = f"[{self.style}]" if self.style else ""
        return f" {head}-{bracket}- "


@dataclass(frozen=True)
class Relationship:
    """The descriptor stored for one ordered pair of types."""

    connector: Connector
    origin: RelationshipOrigin

    @property
    def kind(self) -> RelationshipKind:
        return self.connector.kind


class RelationshipGraph:
    """Two-level mapping ``source -> target -> Relationship``.

    Iteration order is the insertion order of source names, then the insertion
    order of target names within each source.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._edges: dict[str, dict[str, Relationship]] = {}

    def declare(self, source: str, target: str, kind: RelationshipKind | str | None = None) -> Relationship:
        """Declare a relationship from *source* to *target*.

        Without *kind* the declaration is implicit: an ``EXTENSION`` is stored
        only if the pair has no relationship yet. An explicit *kind* always
        replaces the stored descriptor, including any line style.

        Returns:
            The relationship stored for the pair after the call.
        """
        if isinstance(kind, str):
            kind = RelationshipKind.parse(kind, strict=self.strict)

        targets = self._edges.setdefault(source, {})
        if kind is None:
            if target not in targets:
                targets[target] = Relationship(Connector(RelationshipKind.EXTENSION), RelationshipOrigin.IMPLICIT)
            return targets[target]

        targets[target] = Relationship(Connector(kind), RelationshipOrigin.EXPLICIT)
        return targets[target]

    def set_line_style(self, source: str, target: str, style: str) -> Relationship:
        """Attach a line style to the existing relationship for the pair.

        Raises:
            ModelInconsistencyError: If no relationship exists for the pair, or
                its kind has no line to style.
        """
        current = self.get(source, target)
        if current is None:
            raise ModelInconsistencyError(
                f"Cannot set line style: no relationship declared from '{source}' to '{target}'"
            )
        if current.kind is RelationshipKind.UNSPECIFIED:
            raise ModelInconsistencyError(
                f"Cannot set line style: relationship from '{source}' to '{target}' has no kind"
            )
        updated = replace(current, connector=replace(current.connector, style=style))
        self._edges[source][target] = updated
        return updated

    def get(self, source: str, target: str) -> Relationship | None:
        """Return the relationship for the pair, or None."""
        return self._edges.get(source, {}).get(target)

    def entries(self) -> Iterator[tuple[str, str, str]]:
        """Yield ``(source, target, connector_token)`` triples in insertion order."""
        for source, targets in self._edges.items():
            for target, relationship in targets.items():
                yield source, target, relationship.connector.token

    def copy(self) -> RelationshipGraph:
        """Return an independent graph holding the same relationships."""
        clone = RelationshipGraph(strict=self.strict)
        clone._edges = {source: dict(targets) for source, targets in self._edges.items()}
        return clone

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.get(*pair) is not None

    def __len__(self) -> int:
        return sum(len(targets) for targets in self._edges.values())


# ################
# Implementation
# ################

_ARROWHEADS: dict[RelationshipKind, str | None] = {
    RelationshipKind.EXTENSION: "<|",
    RelationshipKind.COMPOSITION: "*",
    RelationshipKind.AGGREGATION: "o",
    RelationshipKind.UNSPECIFIED: None,
}
