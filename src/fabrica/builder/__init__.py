# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fabrica Builder Pattern

Step-by-step computer assembly. A Director fixes the order of the steps;
a builder supplies the parts:

    builder = GamingComputerBuilder()
    Director(builder).construct()
    builder.get_computer().show()
"""

from .builders import (
    GAMING_PROFILE,
    OFFICE_PROFILE,
    ComputerBuilder,
    ComputerProfile,
    GamingComputerBuilder,
    OfficeComputerBuilder,
    ProfileComputerBuilder,
)
from .computer import Computer
from .director import Director

__all__ = [
    "Computer",
    "ComputerBuilder",
    "ComputerProfile",
    "Director",
    "GamingComputerBuilder",
    "OfficeComputerBuilder",
    "ProfileComputerBuilder",
    "GAMING_PROFILE",
    "OFFICE_PROFILE",
]
