# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for report products and their creators.
"""

from __future__ import annotations

import pytest

from fabrica.core import NotFoundError
from fabrica.core.primitives import ReportFormatEnum
from fabrica.reports import (
    REPORT_CREATOR_REGISTRY,
    HTMLReport,
    HTMLReportCreator,
    PDFReport,
    PDFReportCreator,
    Report,
    ReportCreator,
    get_report_creator,
    register_report_creator,
)


class TestReportCreators:
    """Test the factory method and the generate-and-release operation."""

    def test_pdf_generate_report(self, capsys):
        PDFReportCreator().generate_report()

        assert capsys.readouterr().out == "Generating a PDF report.\n"

    def test_html_generate_report(self, capsys):
        HTMLReportCreator().generate_report()

        assert capsys.readouterr().out == "Generating an HTML report.\n"

    @pytest.mark.parametrize(
        "creator_cls, report_cls",
        [(PDFReportCreator, PDFReport), (HTMLReportCreator, HTMLReport)],
    )
    def test_creator_returns_fresh_product_of_fixed_type(self, creator_cls, report_cls):
        creator = creator_cls()
        first = creator.create_report()
        second = creator.create_report()

        assert type(first) is report_cls
        assert first is not second

    def test_generate_returns_none(self, capsys):
        assert PDFReport().generate() is None
        assert HTMLReport().describe() == "Generating an HTML report."

    def test_custom_creator_uses_generic_operation(self, capsys):
        class _MarkdownReport(Report):
            def describe(self) -> str:
                return "Generating a Markdown report."

        class _MarkdownReportCreator(ReportCreator):
            def create_report(self) -> Report:
                return _MarkdownReport()

        _MarkdownReportCreator().generate_report()

        assert capsys.readouterr().out == "Generating a Markdown report.\n"

    def test_abstract_roles(self):
        with pytest.raises(TypeError):
            ReportCreator()
        with pytest.raises(TypeError):
            Report()


class TestReportCreatorRegistry:
    """Test lookup of creators by report format."""

    def test_registered_formats(self):
        assert REPORT_CREATOR_REGISTRY[ReportFormatEnum.PDF] is PDFReportCreator
        assert REPORT_CREATOR_REGISTRY[ReportFormatEnum.HTML] is HTMLReportCreator

    @pytest.mark.parametrize("report_format", [ReportFormatEnum.HTML, "HTML", "html"])
    def test_get_report_creator(self, report_format):
        assert isinstance(get_report_creator(report_format), HTMLReportCreator)

    def test_unknown_format_raises(self):
        with pytest.raises(NotFoundError) as exc_info:
            get_report_creator("docx")

        assert exc_info.value.available == ["PDF", "HTML"]

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError, match="already registered"):

            @register_report_creator(ReportFormatEnum.PDF)
            class _AnotherPDFCreator(ReportCreator):
                def create_report(self) -> Report:
                    return PDFReport()

        assert REPORT_CREATOR_REGISTRY[ReportFormatEnum.PDF] is PDFReportCreator
