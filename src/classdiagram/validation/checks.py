# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for diagram definitions.

These checks run on a parsed :class:`DiagramDefinition` before it is turned
into a model, and report problems that would produce a misleading diagram
rather than a broken one.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from classdiagram.model.diagram import NamePolicy
from classdiagram.model.relationships import ModelInconsistencyError, RelationshipKind
from classdiagram.workspace.definition import DiagramDefinition

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue: the diagram renders, but probably not as intended.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A fatal issue: the definition should be corrected before rendering.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running validation checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that indicate an invalid definition.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(
    definition: DiagramDefinition,
    *,
    include_packages: bool = False,
    strict: bool = False,
) -> ValidationResult:
    """Run all validation checks on a diagram definition.

    Checks performed:

    1. **Duplicate types** (error): the same qualified name is listed twice.

    2. **Name collisions** (error): with simple names, two distinct types
       would render under the same name and merge in the diagram.

    3. **Unknown endpoints** (warning): relationships and notes referring to
       types that are not listed. They still render, but without a class
       block of their own.

    4. **Unknown kinds** (warning, or error in strict mode): relationship
       kinds other than Extension, Composition and Aggregation render with an
       empty connector.

    5. **Unstylable lines** (error): a line style on a relationship whose
       kind has no connector.

    6. **Inheritance cycles** (error): a type that is, through its
       superclass chain, its own ancestor.

    Args:
        definition: The definition to validate.
        include_packages: Naming default used when the definition sets none.
        strict: Strictness default used when the definition sets none.

    Returns:
        A :class:`ValidationResult`; an empty result means no issues.
    """
    if definition.include_packages is not None:
        include_packages = definition.include_packages
    if definition.strict is not None:
        strict = definition.strict

    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    errors.extend(_check_duplicate_types(definition))
    if not include_packages:
        errors.extend(_check_name_collisions(definition))
    warnings.extend(_check_unknown_endpoints(definition))
    kind_warnings, kind_errors = _check_relationship_kinds(definition, strict)
    warnings.extend(kind_warnings)
    errors.extend(kind_errors)
    errors.extend(_check_inheritance_cycles(definition))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _check_duplicate_types(definition: DiagramDefinition) -> list[ValidationError]:
    counts = Counter(type_def.name for type_def in definition.types)
    return [
        ValidationError(message=f"Type '{name}' is defined {count} times.")
        for name, count in counts.items()
        if count > 1
    ]


def _check_name_collisions(definition: DiagramDefinition) -> list[ValidationError]:
    """Return errors for distinct types that share a simple name."""
    by_simple_name: dict[str, list[str]] = {}
    for type_def in definition.types:
        names = by_simple_name.setdefault(NamePolicy.SIMPLE.apply(type_def.name), [])
        if type_def.name not in names:
            names.append(type_def.name)
    return [
        ValidationError(
            message=f"Types {', '.join(repr(n) for n in names)} all display as '{simple}'; "
            "set 'include-packages: true' to tell them apart."
        )
        for simple, names in by_simple_name.items()
        if len(names) > 1
    ]


def _check_unknown_endpoints(definition: DiagramDefinition) -> list[ValidationWarning]:
    known = {type_def.name for type_def in definition.types}
    warnings: list[ValidationWarning] = []
    for rel in definition.relationships:
        for endpoint in (rel.source, rel.target):
            if endpoint not in known:
                warnings.append(
                    ValidationWarning(
                        message=f"Relationship '{rel.source}' -> '{rel.target}' refers to unlisted type '{endpoint}'."
                    )
                )
    for index, note in enumerate(definition.notes):
        for target in note.attach:
            if target not in known:
                warnings.append(ValidationWarning(message=f"Note N{index} is attached to unlisted type '{target}'."))
    return warnings


def _check_relationship_kinds(
    definition: DiagramDefinition, strict: bool
) -> tuple[list[ValidationWarning], list[ValidationError]]:
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []
    for rel in definition.relationships:
        if rel.kind is None:
            continue
        try:
            kind = RelationshipKind.parse(rel.kind, strict=strict)
        except ModelInconsistencyError as exc:
            errors.append(ValidationError(message=f"Relationship '{rel.source}' -> '{rel.target}': {exc}."))
            continue
        if kind is not RelationshipKind.UNSPECIFIED:
            continue
        warnings.append(
            ValidationWarning(
                message=f"Relationship '{rel.source}' -> '{rel.target}' has unknown kind "
                f"'{rel.kind}' and renders without a connector."
            )
        )
        if rel.line_style:
            errors.append(
                ValidationError(
                    message=f"Relationship '{rel.source}' -> '{rel.target}' has a line style but no connector to style."
                )
            )
    return warnings, errors


def _check_inheritance_cycles(definition: DiagramDefinition) -> list[ValidationError]:
    graph: dict[str, list[str]] = {
        type_def.name: [type_def.superclass] if type_def.superclass else [] for type_def in definition.types
    }
    cycle = _detect_cycle(graph)
    if cycle is None:
        return []
    return [ValidationError(message=f"Inheritance cycle detected: {' -> '.join(cycle)}.")]


def _detect_cycle(graph: dict[str, list[str]]) -> list[str] | None:
    """Detect a cycle in a directed graph using DFS.

    Uses a three-colour marking scheme (white/grey/black) to distinguish
    unvisited, in-progress, and fully-explored nodes.

    Returns:
        The nodes forming the cycle with the start node repeated at the end,
        or ``None`` if the graph is acyclic.
    """
    WHITE, GREY, BLACK = 0, 1, 2
    color: dict[str, int] = {}
    path: list[str] = []

    def _dfs(node: str) -> list[str] | None:
        color[node] = GREY
        path.append(node)
        for neighbor in graph.get(node, []):
            state = color.get(neighbor, WHITE)
            if state == GREY:
                cycle_start = path.index(neighbor)
                return path[cycle_start:] + [neighbor]
            if state == WHITE:
                result = _dfs(neighbor)
                if result is not None:
                    return result
        path.pop()
        color[node] = BLACK
        return None

    for node in graph:
        if color.get(node, WHITE) == WHITE:
            result = _dfs(node)
            if result is not None:
                return result
    return None
