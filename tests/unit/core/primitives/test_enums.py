# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from fabrica.core.primitives import (
    BiomeKindEnum,
    DemoSectionEnum,
    PlatformEnum,
    ReportFormatEnum,
)


def test_enum_member_values():
    """Test that key enum members have the correct string value."""
    assert BiomeKindEnum.FOREST == "Forest"
    assert ReportFormatEnum.HTML == "HTML"
    assert PlatformEnum.MAC == "Mac"


def test_from_value_is_case_insensitive():
    assert PlatformEnum.from_value("windows") is PlatformEnum.WINDOWS
    assert ReportFormatEnum.from_value("pdf") is ReportFormatEnum.PDF
    assert PlatformEnum.from_value("Linux") is None
    assert ReportFormatEnum.from_value("DOCX") is None


def test_demo_sections_in_run_order():
    assert [section.value for section in DemoSectionEnum] == [
        "Prototype pattern",
        "Builder pattern",
        "Factory pattern",
        "Abstract factory pattern",
    ]
