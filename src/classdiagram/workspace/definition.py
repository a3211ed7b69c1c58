# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagram definition files.

A definition describes a diagram in YAML without any Python classes behind it:

.. code-block:: yaml

    title: Zoo
    include-packages: false
    types:
      - name: zoo.Animal
        attributes:
          - {name: name, type: String, visibility: private}
        behaviors:
          - {name: speak, returns: String}
      - name: zoo.Dog
        superclass: zoo.Animal
    relationships:
      - {source: zoo.Dog, target: zoo.Animal, line-style: dashed}
    notes:
      - {text: Good boy, attach: [zoo.Dog]}
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from classdiagram.introspection.provider import DescriptorProvider
from classdiagram.model.diagram import DiagramModel, NamePolicy
from classdiagram.model.relationships import ModelInconsistencyError
from classdiagram.model.types import TypeDef

# ###############
# Public Interface
# ###############


class DefinitionError(Exception):
    """Raised when a diagram definition cannot be read, is invalid, or is inconsistent."""


class RelationshipSpec(BaseModel):
    """A relationship entry: ``kind`` omitted means an implicit extension."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source: str
    target: str
    kind: str | None = None
    line_style: str | None = Field(alias="line-style", default=None)


class NoteSpec(BaseModel):
    """A note entry, attached to the listed type names."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    text: str
    attach: list[str] = Field(default_factory=list)


class DiagramDefinition(BaseModel):
    """Top-level model of a diagram definition file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = ""
    include_packages: bool | None = Field(alias="include-packages", default=None)
    strict: bool | None = None
    output: str | None = None
    types: list[TypeDef] = Field(default_factory=list)
    relationships: list[RelationshipSpec] = Field(default_factory=list)
    notes: list[NoteSpec] = Field(default_factory=list)


def load_definition(path: Path) -> DiagramDefinition:
    """Load and validate a diagram definition file.

    An empty file is treated as an empty definition.

    Raises:
        DefinitionError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DefinitionError(f"Cannot read diagram definition '{path}': {exc}") from exc

    return parse_definition(raw, source_label=str(path))


def parse_definition(text: str, source_label: str = "<string>") -> DiagramDefinition:
    """Parse definition YAML text.

    Raises:
        DefinitionError: If the YAML is invalid or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DefinitionError(f"Invalid YAML in diagram definition '{source_label}': {exc}") from exc

    if data is None:
        data = {}

    try:
        return DiagramDefinition.model_validate(data)
    except ValidationError as exc:
        raise DefinitionError(f"Invalid diagram definition '{source_label}': {exc}") from exc


def build_model(
    definition: DiagramDefinition,
    *,
    include_packages: bool = False,
    strict: bool = False,
) -> DiagramModel:
    """Build a :class:`DiagramModel` backed by a :class:`DescriptorProvider`.

    Values set in *definition* take precedence over *include_packages* and
    *strict*, which act as defaults.

    Raises:
        DefinitionError: If a line style targets an undeclared or kindless
            relationship, or a kind is unknown in strict mode.
    """
    provider = DescriptorProvider(definition.types)
    policy_flag = include_packages if definition.include_packages is None else definition.include_packages
    model = DiagramModel(
        definition.title,
        [type_def.name for type_def in definition.types],
        provider=provider,
        policy=NamePolicy.QUALIFIED if policy_flag else NamePolicy.SIMPLE,
        strict=strict if definition.strict is None else definition.strict,
    )

    try:
        for rel in definition.relationships:
            model.add_relationship(rel.source, rel.target, rel.kind)
            if rel.line_style:
                model.set_line_style(rel.source, rel.target, rel.line_style)
    except ModelInconsistencyError as exc:
        raise DefinitionError(str(exc)) from exc

    for note in definition.notes:
        model.add_note(note.text, *note.attach)

    return model
