# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the ``.classdiagram.yaml`` settings file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".classdiagram.yaml"


class ConfigError(Exception):
    """Raised when a settings file is invalid or cannot be loaded."""


@dataclass
class Settings:
    """Project-wide settings for rendering and exporting diagrams.

    Attributes:
        plantuml_jar: Path to ``plantuml.jar``, relative to the project root.
        java: Java executable used to run PlantUML.
        output_directory: Directory (relative to the project root) for ``.puml`` files.
        format: Default export format, or None for PlantUML's default (PNG).
        include_packages: Default naming policy for definitions that do not set one.
        strict: Default strictness for definitions that do not set one.
        timeout: Seconds to wait for PlantUML.
    """

    plantuml_jar: str = "plantuml.jar"
    java: str = "java"
    output_directory: str = "diagrams"
    format: str | None = None
    include_packages: bool = False
    strict: bool = False
    timeout: int = 120


def load_settings(path: Path) -> Settings:
    """Load and parse a settings file.

    A missing file yields the default settings.

    Args:
        path: Path to the ``.classdiagram.yaml`` file.

    Returns:
        A Settings instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the settings are invalid.
    """
    if not path.exists():
        return Settings()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read settings file: {exc}") from exc

    return _parse_settings(text, source_label=str(path))


def find_settings(start: Path) -> Path | None:
    """Return the nearest settings file in *start* or one of its parents."""
    directory = start if start.is_dir() else start.parent
    for candidate in [directory, *directory.parents]:
        settings_file = candidate / SETTINGS_FILE_NAME
        if settings_file.exists():
            return settings_file
    return None


# ################
# Implementation
# ################


def _parse_settings(text: str, source_label: str = "<string>") -> Settings:
    """Parse settings YAML text into a Settings instance.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: settings must be a YAML mapping")

    unknown = sorted(set(data) - set(_FIELDS))
    if unknown:
        raise ConfigError(f"{source_label}: unknown setting(s): {', '.join(unknown)}")

    values: dict[str, object] = {}
    for key, (attribute, expected) in _FIELDS.items():
        if key not in data:
            continue
        value = data[key]
        if attribute == "format" and value is None:
            values[attribute] = None
            continue
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(f"{source_label}: '{key}' must be a {_TYPE_NAMES[expected]}")
        values[attribute] = value

    return Settings(**values)  # type: ignore[arg-type]


_FIELDS: dict[str, tuple[str, type]] = {
    "plantuml-jar": ("plantuml_jar", str),
    "java": ("java", str),
    "output-directory": ("output_directory", str),
    "format": ("format", str),
    "include-packages": ("include_packages", bool),
    "strict": ("strict", bool),
    "timeout": ("timeout", int),
}

_TYPE_NAMES: dict[type, str] = {str: "string", bool: "boolean", int: "integer"}
