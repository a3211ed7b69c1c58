# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the classdiagram command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from classdiagram.workspace.config import (
    SETTINGS_FILE_NAME,
    ConfigError,
    Settings,
    find_settings,
    load_settings,
)
from classdiagram.workspace.definition import DefinitionError, DiagramDefinition, build_model, load_definition

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the classdiagram CLI."""
    parser = argparse.ArgumentParser(
        prog="classdiagram",
        description="classdiagram - PlantUML class diagrams from type descriptions",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output, including the PlantUML command line",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a settings file",
        description=f"Create a {SETTINGS_FILE_NAME} settings file with default values.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to create the settings file in (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check a diagram definition for consistency",
        description="Validate a diagram definition file without rendering it.",
    )
    check_parser.add_argument("definition", help="Path to the diagram definition (.yaml)")

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Write the PlantUML description of a diagram",
        description="Encode a diagram definition as a PlantUML class diagram (.puml).",
    )
    _add_render_arguments(render_parser)

    # export subcommand
    export_parser = subparsers.add_parser(
        "export",
        help="Render a diagram and export it with PlantUML",
        description="Write the PlantUML description, then run plantuml.jar on it.",
    )
    _add_render_arguments(export_parser)
    export_parser.add_argument(
        "--format",
        default=None,
        help="PlantUML output format such as png or svg (default: from settings)",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_render_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("definition", help="Path to the diagram definition (.yaml)")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output .puml path (default: from the definition or settings)",
    )
    parser.add_argument(
        "--include-packages",
        action="store_true",
        default=None,
        help="Show qualified type names instead of simple names",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "render":
        return _cmd_render(args)
    if args.command == "export":
        return _cmd_export(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    settings_file = directory / SETTINGS_FILE_NAME
    if settings_file.exists():
        print(f"Error: settings already exist at '{settings_file}'.", file=sys.stderr)
        return 1

    settings_content = (
        "# classdiagram settings\n"
        "plantuml-jar: plantuml.jar\n"
        "java: java\n"
        "output-directory: diagrams\n"
        "include-packages: false\n"
        "strict: false\n"
    )
    settings_file.write_text(settings_content, encoding="utf-8")
    print(f"Created settings file '{settings_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    loaded = _load(Path(args.definition))
    if loaded is None:
        return 1
    definition, settings, _ = loaded

    if not _report_validation(definition, settings):
        return 1

    print("No issues found.")
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    """Handle the render subcommand."""
    return 0 if _render(args) is not None else 1


def _cmd_export(args: argparse.Namespace) -> int:
    """Handle the export subcommand."""
    from classdiagram.workspace.output import PlantUMLExporter

    rendered = _render(args)
    if rendered is None:
        return 1
    output_path, settings, root = rendered

    jar_path = Path(settings.plantuml_jar)
    if not jar_path.is_absolute():
        jar_path = root / jar_path
    exporter = PlantUMLExporter(jar_path=jar_path, java=settings.java, timeout=settings.timeout)
    fmt = args.format or settings.format
    if not exporter.export(output_path, fmt):
        print(f"Error: PlantUML export of '{output_path}' failed; see log for details.", file=sys.stderr)
        return 1

    print(f"Exported '{output_path}'{f' as {fmt}' if fmt else ''}.")
    return 0


def _render(args: argparse.Namespace) -> tuple[Path, Settings, Path] | None:
    """Validate, encode and write a definition. Returns the output path, settings and project root."""
    from classdiagram.views.encoder import encode_diagram
    from classdiagram.workspace.output import DESCRIPTION_SUFFIX, PersistenceError, write_description

    definition_path = Path(args.definition)
    loaded = _load(definition_path)
    if loaded is None:
        return None
    definition, settings, root = loaded

    if args.include_packages:
        definition = definition.model_copy(update={"include_packages": True})

    if not _report_validation(definition, settings):
        return None

    try:
        model = build_model(definition, include_packages=settings.include_packages, strict=settings.strict)
    except DefinitionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    if args.output:
        output_path = Path(args.output)
    elif definition.output:
        output_path = definition_path.resolve().parent / definition.output
    else:
        output_path = root / settings.output_directory / f"{definition_path.stem}{DESCRIPTION_SUFFIX}"

    try:
        write_description(encode_diagram(model), output_path)
    except PersistenceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    print(f"Wrote '{output_path}'.")
    return output_path, settings, root


def _load(definition_path: Path) -> tuple[DiagramDefinition, Settings, Path] | None:
    """Load a definition and the settings that apply to it, printing any error."""
    if not definition_path.exists():
        print(f"Error: diagram definition '{definition_path}' does not exist.", file=sys.stderr)
        return None

    settings_file = find_settings(definition_path.resolve())
    root = settings_file.parent if settings_file else definition_path.resolve().parent
    try:
        settings = load_settings(settings_file) if settings_file else Settings()
        definition = load_definition(definition_path)
    except (ConfigError, DefinitionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    return definition, settings, root


def _report_validation(definition: DiagramDefinition, settings: Settings) -> bool:
    """Print validation warnings and errors. Returns False if there were errors."""
    from classdiagram.validation.checks import validate

    result = validate(definition, include_packages=settings.include_packages, strict=settings.strict)
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    for error in result.errors:
        print(f"Error: {error.message}", file=sys.stderr)
    return not result.has_errors
