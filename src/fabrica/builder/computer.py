# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Composite product assembled step by step by a computer builder.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import ConfigDict, Field

from ..core.primitives import Model

REQUIRED_PARTS = ("processor", "ram", "storage")


class Computer(Model):
    """
    Computer assembled from independently set parts.

    Unlike most Fabrica models this one is mutable: a builder fills it in one
    part at a time. Parts left unset read as None.
    """

    # Override base Model config: builders assign parts after construction
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=False,
        validate_assignment=True,
        extra="forbid",
    )

    processor: Optional[str] = Field(None, description="Processor model, e.g. 'Intel i9'")
    ram: Optional[str] = Field(None, description="Memory size, e.g. '32GB'")
    storage: Optional[str] = Field(None, description="Storage, e.g. '1TB SSD'")

    def set_processor(self, processor: str) -> None:
        self.processor = processor

    def set_ram(self, ram: str) -> None:
        self.ram = ram

    def set_storage(self, storage: str) -> None:
        self.storage = storage

    def missing_parts(self) -> List[str]:
        """Names of required parts not yet set, in assembly order."""
        return [part for part in REQUIRED_PARTS if getattr(self, part) is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_parts()

    def describe(self) -> str:
        return (
            f"Computer with {self.processor} processor, {self.ram} RAM, "
            f"and {self.storage} storage."
        )

    def show(self) -> None:
        print(self.describe())
