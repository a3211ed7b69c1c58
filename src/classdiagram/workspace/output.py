# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Persisting diagram descriptions and exporting them with PlantUML."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DESCRIPTION_SUFFIX = ".puml"


class PersistenceError(Exception):
    """Raised when a diagram description cannot be written."""


def write_description(text: str, path: Path) -> Path:
    """Write a diagram description to *path* as UTF-8.

    Parent directories are created as needed.

    Returns:
        The path written to.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(f"Cannot write diagram description '{path}': {exc}") from exc
    return path


class PlantUMLExporter:
    """Run the PlantUML jar on a description file.

    Export failures are logged and reported through the return value of
    :meth:`export`; they are never raised.

    Args:
        jar_path: Location of ``plantuml.jar``.
        java: Java executable used to run the jar.
        timeout: Seconds to wait for the renderer.
    """

    def __init__(self, jar_path: str | Path = "plantuml.jar", java: str = "java", timeout: int = 120) -> None:
        self.jar_path = Path(jar_path)
        self.java = java
        self.timeout = timeout

    def command(self, description: Path, fmt: str | None = None) -> list[str]:
        """Return the command line that renders *description*, e.g. ``[..., "-svg"]``."""
        cmd = [self.java, "-jar", str(self.jar_path), str(description)]
        if fmt:
            cmd.append(f"-{fmt.lstrip('-')}")
        return cmd

    def export(self, description: Path, fmt: str | None = None) -> bool:
        """Render *description*, optionally in output format *fmt* (``png``, ``svg``, ...).

        Returns:
            True if the renderer exited successfully, False otherwise.
        """
        cmd = self.command(description, fmt)
        logger.debug("Running PlantUML: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except FileNotFoundError:
            logger.warning("Cannot export '%s': '%s' executable not found on PATH", description, self.java)
            return False
        except subprocess.TimeoutExpired:
            logger.warning("Cannot export '%s': PlantUML timed out after %ss", description, self.timeout)
            return False
        except OSError as exc:
            logger.warning("Cannot export '%s': %s", description, exc)
            return False

        if result.returncode != 0:
            logger.warning(
                "PlantUML failed on '%s' (exit %d): %s", description, result.returncode, result.stderr.strip()[:200]
            )
            return False
        return True
