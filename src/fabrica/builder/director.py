# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging

from .builders import ComputerBuilder
from .computer import Computer

logger = logging.getLogger(__name__)


class Director:
    """
    Sequences the assembly steps of any ComputerBuilder.

    The director has no knowledge of part values; it only fixes the order:
    processor, then RAM, then storage.
    """

    def __init__(self, builder: ComputerBuilder):
        if not isinstance(builder, ComputerBuilder):
            raise TypeError("Director requires a ComputerBuilder")
        self._builder = builder

    @property
    def builder(self) -> ComputerBuilder:
        return self._builder

    def construct(self) -> Computer:
        """Run every assembly step in order and return the builder's result."""
        logger.debug(f"Constructing computer with {type(self._builder).__name__}")
        self._builder.build_processor()
        self._builder.build_ram()
        self._builder.build_storage()
        return self._builder.get_computer()
