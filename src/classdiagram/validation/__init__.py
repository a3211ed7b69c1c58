# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for diagram definitions (name collisions, unknown kinds, etc.)."""

from classdiagram.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
