# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for classdiagram documentation."""

project = "classdiagram"
author = "classdiagram Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

autodoc_member_order = "bysource"

html_theme = "alabaster"
