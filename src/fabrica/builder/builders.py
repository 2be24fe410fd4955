# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Computer builders.

A builder knows the concrete values for each part of one computer profile;
the Director knows only the order in which parts are assembled.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pydantic import Field

from ..core.exceptions import IncompleteBuildError
from ..core.primitives import Model
from .computer import Computer

logger = logging.getLogger(__name__)


class ComputerProfile(Model):
    """Fixed part values defining one family of computers."""

    name: str
    processor: str = Field(..., description="Processor installed by build_processor()")
    ram: str = Field(..., description="Memory installed by build_ram()")
    storage: str = Field(..., description="Storage installed by build_storage()")


GAMING_PROFILE = ComputerProfile(
    name="Gaming", processor="Intel i9", ram="32GB", storage="1TB SSD"
)
OFFICE_PROFILE = ComputerProfile(
    name="Office", processor="Intel i5", ram="16GB", storage="512GB SSD"
)


class ComputerBuilder(ABC):
    """
    Abstract base class for computer builders.

    Subclasses must implement:
    - build_processor(), build_ram(), build_storage(): install one part each
    - get_computer(): hand over the computer under construction
    """

    @abstractmethod
    def build_processor(self) -> None:
        pass

    @abstractmethod
    def build_ram(self) -> None:
        pass

    @abstractmethod
    def build_storage(self) -> None:
        pass

    @abstractmethod
    def get_computer(self, *, require_complete: bool = False) -> Computer:
        pass


class ProfileComputerBuilder(ComputerBuilder):
    """
    Builder that installs the parts listed in a ComputerProfile.

    ``get_computer()`` returns the computer in whatever state it is in; call it
    before every step has run and the result is partially assembled. Pass
    ``require_complete=True`` to refuse partial results instead.
    """

    def __init__(self, profile: ComputerProfile):
        if not isinstance(profile, ComputerProfile):
            raise TypeError("ProfileComputerBuilder requires a ComputerProfile")
        self._profile = profile
        self._computer = Computer()

    @property
    def profile(self) -> ComputerProfile:
        return self._profile

    def build_processor(self) -> None:
        logger.debug(f"{self._profile.name}: installing processor {self._profile.processor}")
        self._computer.set_processor(self._profile.processor)

    def build_ram(self) -> None:
        logger.debug(f"{self._profile.name}: installing RAM {self._profile.ram}")
        self._computer.set_ram(self._profile.ram)

    def build_storage(self) -> None:
        logger.debug(f"{self._profile.name}: installing storage {self._profile.storage}")
        self._computer.set_storage(self._profile.storage)

    def get_computer(self, *, require_complete: bool = False) -> Computer:
        """
        Return the computer under construction.

        Args:
            require_complete: Raise instead of returning a partial computer

        Raises:
            IncompleteBuildError: If require_complete is set and parts are missing
        """
        if require_complete and not self._computer.is_complete:
            raise IncompleteBuildError(self._computer.missing_parts())
        return self._computer

    def reset(self) -> None:
        """Start a fresh computer; a previously retrieved one stays with its caller."""
        self._computer = Computer()


class GamingComputerBuilder(ProfileComputerBuilder):
    """High-end configuration: Intel i9, 32GB RAM, 1TB SSD."""

    def __init__(self):
        super().__init__(GAMING_PROFILE)


class OfficeComputerBuilder(ProfileComputerBuilder):
    """Standard configuration: Intel i5, 16GB RAM, 512GB SSD."""

    def __init__(self):
        super().__init__(OFFICE_PROFILE)
