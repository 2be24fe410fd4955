# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for Fabrica tests.
"""

from __future__ import annotations

import pytest

from fabrica.prototype import BiomeRegistry, Forest


@pytest.fixture
def forest_template() -> Forest:
    return Forest(tree_type="Pine", wildlife="Deer")


@pytest.fixture
def biome_registry():
    """Registry pre-loaded with the standard templates, closed after the test."""
    with BiomeRegistry.with_defaults() as registry:
        yield registry
