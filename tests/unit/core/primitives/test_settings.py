# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fabrica.core.primitives import SEPARATOR_WIDTH, DemoSettings


class TestDemoSettings:
    """Test the demonstration settings model."""

    def test_defaults(self):
        settings = DemoSettings()

        assert settings.separator == "-" * SEPARATOR_WIDTH
        assert len(settings.separator) == 56
        assert settings.show_headings is True
        assert settings.log_level == "WARNING"

    def test_log_level_is_case_insensitive(self):
        assert DemoSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            DemoSettings(log_level="VERBOSE")

    def test_multiline_separator_rejected(self):
        with pytest.raises(ValidationError):
            DemoSettings(separator="---\n---")

    def test_unknown_setting_rejected(self):
        with pytest.raises(ValidationError):
            DemoSettings(colour=True)
