# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fabrica Core

Shared primitives and exceptions used by every pattern component.
"""

from . import primitives
from .exceptions import IncompleteBuildError, NotFoundError
from .primitives import (
    BiomeKindEnum,
    DemoSectionEnum,
    DemoSettings,
    Model,
    PlatformEnum,
    ReportFormatEnum,
)

__all__ = [
    "primitives",
    # Exceptions
    "IncompleteBuildError",
    "NotFoundError",
    # Primitives
    "BiomeKindEnum",
    "DemoSectionEnum",
    "DemoSettings",
    "Model",
    "PlatformEnum",
    "ReportFormatEnum",
]
