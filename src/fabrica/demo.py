#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Creational Patterns Demonstration

Runs the four pattern demonstrations in a fixed order:

1. **Prototype**: clone Forest, Desert and Ocean templates from a registry
2. **Builder**: assemble a gaming and an office computer through a Director
3. **Factory Method**: generate a PDF and an HTML report
4. **Abstract Factory**: play video and audio on Windows, then on Mac

Each action prints one line; sections are separated by a dashed line.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .builder import Director, GamingComputerBuilder, OfficeComputerBuilder
from .core.primitives import DemoSectionEnum, DemoSettings
from .multimedia import MacMultimediaFactory, MultimediaFactory, WindowsMultimediaFactory
from .prototype import BiomeRegistry
from .reports import HTMLReportCreator, PDFReportCreator, ReportCreator

logger = logging.getLogger(__name__)


def demo_prototype() -> None:
    with BiomeRegistry.with_defaults() as registry:
        for name in ("Forest", "Desert", "Ocean"):
            registry.create(name).print()


def demo_builder() -> None:
    for builder in (GamingComputerBuilder(), OfficeComputerBuilder()):
        Director(builder).construct()
        builder.get_computer().show()


def demo_factory_method() -> None:
    creators: Tuple[ReportCreator, ...] = (PDFReportCreator(), HTMLReportCreator())
    for creator in creators:
        creator.generate_report()


def demo_abstract_factory() -> None:
    factories: Tuple[MultimediaFactory, ...] = (
        WindowsMultimediaFactory(),
        MacMultimediaFactory(),
    )
    for factory in factories:
        video_player = factory.create_video_player()
        audio_player = factory.create_audio_player()
        video_player.play()
        audio_player.play()


DEMONSTRATIONS = (
    (DemoSectionEnum.PROTOTYPE, demo_prototype),
    (DemoSectionEnum.BUILDER, demo_builder),
    (DemoSectionEnum.FACTORY_METHOD, demo_factory_method),
    (DemoSectionEnum.ABSTRACT_FACTORY, demo_abstract_factory),
)


def run_demo(settings: Optional[DemoSettings] = None) -> None:
    """
    Run every demonstration, printing a heading before each section and the
    separator between sections.

    Args:
        settings: Output settings (uses defaults if not provided)
    """
    settings = settings or DemoSettings()
    for index, (section, demonstration) in enumerate(DEMONSTRATIONS):
        if index:
            print(settings.separator)
        logger.debug(f"Running section: {section.value}")
        if settings.show_headings:
            print(section.value)
        demonstration()


def main(settings: Optional[DemoSettings] = None) -> int:
    """Command-line entry point; takes no arguments and returns exit code 0."""
    settings = settings or DemoSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_demo(settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
