# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Report products.

Reports are stateless: generating one prints a fixed line and returns nothing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from ..core.primitives import Model, ReportFormatEnum


class Report(Model, ABC):
    """Abstract base class for all report products."""

    format: ClassVar[ReportFormatEnum]

    @abstractmethod
    def describe(self) -> str:
        """Line written when the report is generated."""
        pass

    def generate(self) -> None:
        print(self.describe())


class PDFReport(Report):
    format: ClassVar[ReportFormatEnum] = ReportFormatEnum.PDF

    def describe(self) -> str:
        return "Generating a PDF report."


class HTMLReport(Report):
    format: ClassVar[ReportFormatEnum] = ReportFormatEnum.HTML

    def describe(self) -> str:
        return "Generating an HTML report."
