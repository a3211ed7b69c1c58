# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""PlantUML encoding of a :class:`DiagramModel`.

The output is built in one pass, in this order:

- header: start marker, layout pragma and title;
- one ``class`` block per registered type, in registration order;
- one line per relationship, including the ``EXTENSION`` relationships
  derived from each type's superclass;
- note declarations and their association lines;
- end marker.

Encoding reads the model but never changes it. Superclass relationships are
derived into a copy of the relationship graph, so encoding the same model
twice yields identical text.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from classdiagram.introspection.provider import TypeMetadataProvider
from classdiagram.model.diagram import DiagramModel
from classdiagram.model.relationships import RelationshipGraph
from classdiagram.model.types import AttributeDef, BehaviorDef, Visibility

# ###############
# Public Interface
# ###############

START_MARKER = "@startuml"
END_MARKER = "@enduml"
LAYOUT_PRAGMA = "!pragma layout smetana"


def encode_diagram(model: DiagramModel) -> str:
    """Encode *model* as a PlantUML class-diagram description.

    Type metadata is read from the model's provider, and every name goes
    through :meth:`DiagramModel.display_name`. Provider errors propagate.

    Returns:
        The description text, terminated by a newline.
    """
    provider = model.provider
    display = model.display_name
    lines = [START_MARKER, LAYOUT_PRAGMA, f"title {model.title}"]

    for handle in model.types:
        lines.extend(_type_block(display(handle), provider.attributes(handle), provider.behaviors(handle)))

    relationships = _with_superclass_relationships(model, provider)
    for source, target, token in relationships.entries():
        lines.append(f"{display(target)}{token}{display(source)}")

    lines.extend(model.notes.all(rename=display))
    lines.append(END_MARKER)
    return "\n".join(lines) + "\n"


# ################
# Implementation
# ################

_VISIBILITY_MARKERS: dict[Visibility, str] = {
    Visibility.PUBLIC: "+",
    Visibility.PRIVATE: "-",
    Visibility.PROTECTED: "#",
}


def _type_block(name: str, attributes: Sequence[AttributeDef], behaviors: Sequence[BehaviorDef]) -> list[str]:
    """Return the ``class`` block lines for one type."""
    lines = [f"class {name} {{"]
    for attr in attributes:
        marker = _VISIBILITY_MARKERS.get(attr.visibility, "")
        lines.append(f"\t{marker}{attr.type} {attr.name}")
    for behavior in behaviors:
        suffix = f" {behavior.returns}" if behavior.returns else ""
        lines.append(f"\t+{behavior.name}(){suffix}")
    lines.append("}")
    return lines


def _with_superclass_relationships(model: DiagramModel, provider: TypeMetadataProvider) -> RelationshipGraph:
    """Return a copy of the model's relationships plus implicit superclass ones."""
    graph = model.relationships.copy()
    for handle in model.types:
        parent: Any = provider.superclass(handle)
        if parent is None or provider.is_root(parent):
            continue
        graph.declare(model.key(handle), model.key(parent))
    return graph
