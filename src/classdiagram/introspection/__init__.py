# Copyright 2026 classdiagram Contributors
# SPDX-License-Identifier: Apache-2.0

"""Providers of type metadata (names, superclasses, attributes, behaviors)."""

from classdiagram.introspection.provider import DescriptorProvider, PythonTypeProvider, TypeMetadataProvider

__all__ = [
    "DescriptorProvider",
    "PythonTypeProvider",
    "TypeMetadataProvider",
]
