# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fabrica Factory Method Pattern

Report creators defer the choice of report type to their subclasses while
sharing one generate-and-release operation:

    PDFReportCreator().generate_report()  # Generating a PDF report.
"""

from .creators import HTMLReportCreator, PDFReportCreator, ReportCreator
from .registry import REPORT_CREATOR_REGISTRY, get_report_creator, register_report_creator
from .report import HTMLReport, PDFReport, Report

__all__ = [
    # Products
    "Report",
    "PDFReport",
    "HTMLReport",
    # Creators
    "ReportCreator",
    "PDFReportCreator",
    "HTMLReportCreator",
    # Lookup
    "REPORT_CREATOR_REGISTRY",
    "get_report_creator",
    "register_report_creator",
]
