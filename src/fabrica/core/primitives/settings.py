# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from .model import Model

SEPARATOR_WIDTH = 56


class DemoSettings(Model):
    """
    Settings for the demonstration driver.

    Passed explicitly to ``fabrica.demo.run_demo``; there is no settings file
    or environment lookup.

    Usage Examples:
        # Defaults reproduce the reference transcript
        settings = DemoSettings()

        # Bare output: no headings, blank line between sections
        settings = DemoSettings(show_headings=False, separator="")
    """

    separator: str = Field(
        default="-" * SEPARATOR_WIDTH,
        description="Line printed between demonstration sections.",
    )
    show_headings: bool = Field(
        default=True,
        description="Print the pattern name before each section.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Root log level applied by the command-line entry point.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("separator")
    @classmethod
    def _single_line_separator(cls, value: str) -> str:
        if "\n" in value:
            raise ValueError("separator must be a single line")
        return value
