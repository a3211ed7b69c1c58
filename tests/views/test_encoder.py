# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for PlantUML encoding of diagram models."""

import pytest

from classdiagram.introspection.provider import DescriptorProvider
from classdiagram.model import (
    AttributeDef,
    BehaviorDef,
    DiagramModel,
    NamePolicy,
    RelationshipKind,
    TypeDef,
    Visibility,
)
from classdiagram.views.encoder import encode_diagram

# ###############
# Helpers
# ###############


class Animal:
    pass


class Dog(Animal):
    pass


class Node:
    pass


def _relationship_lines(text: str) -> list[str]:
    """Return the lines between the type blocks and the notes."""
    body = text.splitlines()[3:-1]
    return [
        line
        for line in body
        if not line.startswith(("class ", "\t", "}", "note ")) and " .. " not in line
    ]


def _zoo_provider() -> DescriptorProvider:
    return DescriptorProvider(
        [
            TypeDef(
                name="zoo.Animal",
                attributes=[
                    AttributeDef(name="name", type="String", visibility=Visibility.PRIVATE),
                    AttributeDef(name="age", type="int", visibility=Visibility.PROTECTED),
                    AttributeDef(name="id", type="long", visibility=Visibility.PUBLIC),
                    AttributeDef(name="tag", type="String", visibility=Visibility.OTHER),
                ],
                behaviors=[
                    BehaviorDef(name="speak", returns="String"),
                    BehaviorDef(name="sleep", returns="void"),
                ],
            ),
            TypeDef(name="zoo.Dog", superclass="zoo.Animal"),
        ]
    )


# ###############
# Document structure
# ###############


def test_header_and_footer() -> None:
    """Output starts with the start marker, pragma and title, and ends with the end marker."""
    text = encode_diagram(DiagramModel("My Diagram"))
    lines = text.splitlines()
    assert lines[:3] == ["@startuml", "!pragma layout smetana", "title My Diagram"]
    assert lines[-1] == "@enduml"
    assert text.endswith("\n")


def test_type_block_members_in_declaration_order() -> None:
    """Attributes carry visibility markers; behaviors are public with return types."""
    model = DiagramModel("Zoo", ["zoo.Animal"], provider=_zoo_provider())
    text = encode_diagram(model)
    assert (
        "class Animal {\n"
        "\t-String name\n"
        "\t#int age\n"
        "\t+long id\n"
        "\tString tag\n"
        "\t+speak() String\n"
        "\t+sleep() void\n"
        "}\n"
    ) in text


def test_behavior_without_return_type() -> None:
    """A behavior with unknown return type renders without a trailing type."""
    provider = DescriptorProvider([TypeDef(name="Job", behaviors=[BehaviorDef(name="run")])])
    text = encode_diagram(DiagramModel(types=["Job"], provider=provider))
    assert "\t+run()\n" in text


def test_full_output_for_inheritance_example() -> None:
    """Animal and Dog render as two blocks and exactly one extension line."""
    model = DiagramModel("Pets", [Animal, Dog])
    assert encode_diagram(model) == (
        "@startuml\n"
        "!pragma layout smetana\n"
        "title Pets\n"
        "class Animal {\n"
        "}\n"
        "class Dog {\n"
        "}\n"
        "Animal <|-- Dog\n"
        "@enduml\n"
    )


# ###############
# Relationships
# ###############


def test_no_relationship_to_root_type() -> None:
    """Types deriving directly from object produce no relationship line."""
    model = DiagramModel(types=[Animal, Node])
    assert _relationship_lines(encode_diagram(model)) == []


def test_implicit_relationship_does_not_override_explicit() -> None:
    """An explicit relationship for the superclass pair keeps its kind."""
    model = DiagramModel(types=[Animal, Dog])
    model.add_relationship(Dog, Animal, RelationshipKind.AGGREGATION)
    assert _relationship_lines(encode_diagram(model)) == ["Animal o-- Dog"]


def test_self_relationship_renders_one_line() -> None:
    """A self-composition renders exactly one line naming the type on both sides."""
    model = DiagramModel(types=[Node])
    model.add_relationship(Node, Node, RelationshipKind.COMPOSITION)
    assert _relationship_lines(encode_diagram(model)) == ["Node *-- Node"]


def test_styled_inheritance_line() -> None:
    """A styled relationship renders its style between the dashes."""
    model = DiagramModel(types=[Animal, Dog])
    model.add_relationship(Dog, Animal)
    model.set_line_style(Dog, Animal, "dashed")
    assert _relationship_lines(encode_diagram(model)) == ["Animal <|-[dashed]- Dog"]


def test_unknown_kind_renders_empty_connector() -> None:
    """An unknown kind renders target and source with no connector between them."""
    model = DiagramModel(types=[Animal, Node])
    model.add_relationship(Node, Animal, "Uses")
    assert "AnimalNode" in encode_diagram(model).splitlines()


def test_relationship_lines_follow_declaration_order() -> None:
    """Explicit relationships come first in declaration order, then derived ones."""
    model = DiagramModel(types=[Animal, Dog, Node])
    model.add_relationship(Node, Node, RelationshipKind.AGGREGATION)
    model.add_relationship(Node, Animal, RelationshipKind.COMPOSITION)
    assert _relationship_lines(encode_diagram(model)) == [
        "Node o-- Node",
        "Animal *-- Node",
        "Animal <|-- Dog",
    ]


def test_superclass_outside_diagram_still_rendered() -> None:
    """A superclass that is not registered still gets an extension line."""
    model = DiagramModel(types=[Dog])
    assert _relationship_lines(encode_diagram(model)) == ["Animal <|-- Dog"]


# ###############
# Notes
# ###############


def test_notes_rendered_after_relationships() -> None:
    """Notes follow relationship lines, each with its association lines."""
    model = DiagramModel(types=[Animal, Dog])
    model.add_note("floating")
    model.add_note("deprecated", Dog, Animal)
    lines = encode_diagram(model).splitlines()
    start = lines.index("Animal <|-- Dog")
    assert lines[start + 1 :] == [
        'note "floating" as N0',
        'note "deprecated" as N1',
        "N1 .. Dog",
        "N1 .. Animal",
        "@enduml",
    ]


# ###############
# Naming policy and purity
# ###############


def test_policy_toggle_renames_everything() -> None:
    """Switching to qualified names after declarations renames blocks, lines and notes alike."""
    model = DiagramModel(types=["zoo.Animal", "zoo.Dog"], provider=_zoo_provider())
    model.add_note("good boy", "zoo.Dog")
    model.include_packages(True)
    text = encode_diagram(model)
    assert "class zoo.Animal {" in text
    assert "class zoo.Dog {" in text
    assert "zoo.Animal <|-- zoo.Dog" in text
    assert "N0 .. zoo.Dog" in text
    assert "class Dog {" not in text
    assert "N0 .. Dog\n" not in text


@pytest.mark.parametrize("policy", [NamePolicy.SIMPLE, NamePolicy.QUALIFIED])
def test_encoding_is_deterministic(policy: NamePolicy) -> None:
    """Encoding the same model twice yields identical output."""
    model = DiagramModel("Zoo", ["zoo.Animal", "zoo.Dog"], provider=_zoo_provider(), policy=policy)
    model.add_relationship("zoo.Animal", "zoo.Animal", "Composition")
    model.add_note("n", "zoo.Dog")
    assert encode_diagram(model) == encode_diagram(model)


def test_encoding_does_not_mutate_model() -> None:
    """Derived superclass relationships are not stored in the model."""
    model = DiagramModel(types=[Animal, Dog])
    encode_diagram(model)
    assert len(model.relationships) == 0


def test_model_encode_delegates() -> None:
    """DiagramModel.encode matches encode_diagram."""
    model = DiagramModel("T", [Animal, Dog])
    assert model.encode() == encode_diagram(model)


def test_provider_errors_propagate() -> None:
    """Errors raised by the provider are not masked."""

    class BrokenProvider(DescriptorProvider):
        def attributes(self, handle):
            raise RuntimeError("metadata unavailable")

    model = DiagramModel(types=["X"], provider=BrokenProvider())
    with pytest.raises(RuntimeError, match="metadata unavailable"):
        encode_diagram(model)


def test_relationship_declared_by_display_name_merges_with_superclass() -> None:
    """Declaring a pair through display names replaces the derived superclass line."""
    model = DiagramModel(types=[Animal, Dog])
    model.add_relationship(model.display_name(Dog), model.display_name(Animal), RelationshipKind.COMPOSITION)

    assert _relationship_lines(encode_diagram(model)) == ["Animal *-- Dog"]


def test_descriptor_display_names_resolve_to_registered_types() -> None:
    """Simple names of descriptor types resolve to their qualified keys."""
    provider = DescriptorProvider([TypeDef(name="zoo.Cat", superclass="zoo.Pet"), TypeDef(name="zoo.Pet")])
    model = DiagramModel(types=["zoo.Pet", "zoo.Cat"], provider=provider)
    model.add_relationship("Cat", "Pet", RelationshipKind.AGGREGATION)
    model.add_note("Soft", "Cat")

    text = encode_diagram(model)

    assert _relationship_lines(text) == ["Pet o-- Cat"]
    assert "N0 .. Cat" in text
    model.include_packages(True)
    assert _relationship_lines(encode_diagram(model)) == ["zoo.Pet o-- zoo.Cat"]
