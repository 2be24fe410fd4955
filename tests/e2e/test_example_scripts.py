# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Example Scripts End-to-End Tests

Executes the example scripts so the public examples keep working as the
package changes.
"""

import sys
from pathlib import Path

# Add examples directory to path for imports
examples_dir = Path(__file__).parent.parent.parent / "examples"
sys.path.insert(0, str(examples_dir))


class TestExampleScripts:
    """Test that all example scripts execute without errors."""

    def test_biome_catalog(self, capsys):
        """Test the biome catalog example builds variations without touching templates."""
        import biome_catalog  # noqa  # type:ignore

        catalog = biome_catalog.main()

        assert catalog["name"].tolist() == ["Forest", "Desert", "Ocean", "Boreal Forest", "Dune Sea"]
        assert "Forest with Spruce trees and Moose wildlife." in capsys.readouterr().out

    def test_platform_lookup(self, capsys):
        """Test the lookup example selects consistent families by name."""
        import platform_lookup  # noqa  # type:ignore

        platform_lookup.main()

        out = capsys.readouterr().out
        assert "Playing video on Mac.\nPlaying audio on Mac." in out
        assert "Computer with AMD Threadripper processor, 128GB RAM, and 4TB NVMe storage." in out
