#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Biome Catalog: Variations from Prototypes

Registers the standard biome templates, derives seasonal variations by cloning
with updated attributes, and prints the resulting catalog as a DataFrame.

The original templates are never modified: every variation is an independent
copy.
"""

from fabrica.prototype import BiomeRegistry


def main():
    with BiomeRegistry.with_defaults() as registry:
        boreal = registry.create("Forest").clone(updates={"tree_type": "Spruce", "wildlife": "Moose"})
        registry.register("Boreal Forest", boreal)

        dune_sea = registry.create("Desert").clone(updates={"climate": "Arid"})
        registry.register("Dune Sea", dune_sea)

        print("BIOME CATALOG")
        print("=" * 60)
        catalog = registry.to_frame()
        print(catalog.to_string(index=False))

        # Templates remain as registered
        assert registry.create("Forest").describe() == "Forest with Pine trees and Deer wildlife."
        assert len(catalog) == 5

    return catalog


if __name__ == "__main__":
    main()
