# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Optional


class BiomeKindEnum(str, Enum):
    """Kinds of biome template available for cloning."""

    FOREST = "Forest"
    DESERT = "Desert"
    OCEAN = "Ocean"


class ReportFormatEnum(str, Enum):
    """Output formats a report creator can produce."""

    PDF = "PDF"
    HTML = "HTML"

    @classmethod
    def from_value(cls, value: str) -> Optional["ReportFormatEnum"]:
        """Case-insensitive lookup; returns None for unknown formats."""
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        return None


class PlatformEnum(str, Enum):
    """
    Platform families for multimedia products.

    Every product created by one multimedia factory belongs to the same family.
    """

    WINDOWS = "Windows"
    MAC = "Mac"

    @classmethod
    def from_value(cls, value: str) -> Optional["PlatformEnum"]:
        """Case-insensitive lookup; returns None for unknown platforms."""
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        return None


class DemoSectionEnum(str, Enum):
    """Demonstration sections, declared in run order."""

    PROTOTYPE = "Prototype pattern"
    BUILDER = "Builder pattern"
    FACTORY_METHOD = "Factory pattern"
    ABSTRACT_FACTORY = "Abstract factory pattern"
