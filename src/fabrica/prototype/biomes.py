# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Concrete biome templates.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ..core.primitives import BiomeKindEnum
from .base import BiomeBase


class Forest(BiomeBase):
    """Forest biome described by its dominant trees and wildlife."""

    kind: ClassVar[BiomeKindEnum] = BiomeKindEnum.FOREST

    tree_type: str = Field(..., description="Dominant tree species, e.g. 'Pine'")
    wildlife: str = Field(..., description="Characteristic wildlife, e.g. 'Deer'")

    def describe(self) -> str:
        return f"Forest with {self.tree_type} trees and {self.wildlife} wildlife."


class Desert(BiomeBase):
    """Desert biome described by its sand and climate."""

    kind: ClassVar[BiomeKindEnum] = BiomeKindEnum.DESERT

    sand_type: str = Field(..., description="Sand colour or composition, e.g. 'Golden'")
    climate: str = Field(..., description="Prevailing climate, e.g. 'Hot'")

    def describe(self) -> str:
        return f"Desert with {self.sand_type} sand and {self.climate} climate."


class Ocean(BiomeBase):
    """Ocean biome described by its water and marine life."""

    kind: ClassVar[BiomeKindEnum] = BiomeKindEnum.OCEAN

    water_type: str = Field(..., description="Water type, e.g. 'Salt'")
    marine_life: str = Field(..., description="Characteristic marine life, e.g. 'Fish'")

    def describe(self) -> str:
        return f"Ocean with {self.water_type} water and {self.marine_life} marine life."
