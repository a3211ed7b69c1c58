# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings, diagram definition files, and output for classdiagram projects."""

from classdiagram.workspace.config import (
    SETTINGS_FILE_NAME,
    ConfigError,
    Settings,
    find_settings,
    load_settings,
)
from classdiagram.workspace.definition import (
    DefinitionError,
    DiagramDefinition,
    NoteSpec,
    RelationshipSpec,
    build_model,
    load_definition,
    parse_definition,
)
from classdiagram.workspace.output import (
    DESCRIPTION_SUFFIX,
    PersistenceError,
    PlantUMLExporter,
    write_description,
)

__all__ = [
    "ConfigError",
    "DESCRIPTION_SUFFIX",
    "DefinitionError",
    "DiagramDefinition",
    "NoteSpec",
    "PersistenceError",
    "PlantUMLExporter",
    "RelationshipSpec",
    "SETTINGS_FILE_NAME",
    "Settings",
    "build_model",
    "find_settings",
    "load_definition",
    "load_settings",
    "parse_definition",
    "write_description",
]
