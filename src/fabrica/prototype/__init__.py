# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fabrica Prototype Pattern

Biome templates registered by name and copied on demand:

    registry = BiomeRegistry.with_defaults()
    registry.create("Desert").print()
"""

from .base import BiomeBase
from .biomes import Desert, Forest, Ocean
from .registry import BiomeRegistry

__all__ = [
    "BiomeBase",
    "BiomeRegistry",
    "Desert",
    "Forest",
    "Ocean",
]
