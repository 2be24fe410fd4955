#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Choosing Families by Name

Shows the lookup helpers that sit on top of the factory patterns:

1. **Report formats**: pick a report creator from a format name
2. **Platforms**: pick a whole multimedia family from a platform name
3. **Builder profiles**: drive a custom computer profile through the Director
"""

from fabrica.builder import ComputerProfile, Director, ProfileComputerBuilder
from fabrica.multimedia import get_multimedia_factory
from fabrica.reports import get_report_creator


def main():
    print("Reports by format")
    for report_format in ("pdf", "html"):
        get_report_creator(report_format).generate_report()

    print("\nPlayers by platform")
    for platform in ("mac", "windows"):
        factory = get_multimedia_factory(platform)
        factory.create_video_player().play()
        factory.create_audio_player().play()

    print("\nCustom builder profile")
    workstation = ComputerProfile(
        name="Workstation", processor="AMD Threadripper", ram="128GB", storage="4TB NVMe"
    )
    builder = ProfileComputerBuilder(workstation)
    Director(builder).construct()
    builder.get_computer(require_complete=True).show()


if __name__ == "__main__":
    main()
