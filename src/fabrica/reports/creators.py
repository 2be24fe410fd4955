# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Report creators.

The creator fixes the generic operation (create a report, generate it, let it
go) and leaves the choice of report type to its subclasses.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ..core.primitives import ReportFormatEnum
from .registry import register_report_creator
from .report import HTMLReport, PDFReport, Report

logger = logging.getLogger(__name__)


class ReportCreator(ABC):
    """
    Abstract base class for report creators.

    Subclasses must implement:
    - create_report(): Return a new report of the creator's type
    """

    @abstractmethod
    def create_report(self) -> Report:
        pass

    def generate_report(self) -> None:
        """Create a report, generate it, then release it."""
        report = self.create_report()
        logger.debug(f"{type(self).__name__} created {type(report).__name__}")
        report.generate()
        del report


@register_report_creator(ReportFormatEnum.PDF)
class PDFReportCreator(ReportCreator):
    def create_report(self) -> Report:
        return PDFReport()


@register_report_creator(ReportFormatEnum.HTML)
class HTMLReportCreator(ReportCreator):
    def create_report(self) -> Report:
        return HTMLReport()
