# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fabrica Core Primitives

Base model, enumerations and settings shared by the pattern components.
"""

from .enums import BiomeKindEnum, DemoSectionEnum, PlatformEnum, ReportFormatEnum
from .model import Model
from .settings import SEPARATOR_WIDTH, DemoSettings

__all__ = [
    # Model
    "Model",
    # Enums
    "BiomeKindEnum",
    "DemoSectionEnum",
    "PlatformEnum",
    "ReportFormatEnum",
    # Settings
    "DemoSettings",
    "SEPARATOR_WIDTH",
]
