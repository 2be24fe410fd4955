# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from fabrica.core import IncompleteBuildError, NotFoundError


def test_not_found_error_is_a_key_error():
    error = NotFoundError("Tundra", ["Forest", "Ocean"], kind="biome template")

    assert isinstance(error, KeyError)
    assert isinstance(error, LookupError)
    assert error.key == "Tundra"
    assert error.available == ["Forest", "Ocean"]
    assert str(error) == "No biome template registered under 'Tundra' (registered: 'Forest', 'Ocean')"


def test_not_found_error_with_empty_registry():
    assert str(NotFoundError("x")) == "No entry registered under 'x' (registered: none)"


def test_incomplete_build_error_lists_missing_parts():
    error = IncompleteBuildError(["ram", "storage"])

    assert isinstance(error, ValueError)
    assert error.missing == ["ram", "storage"]
    assert "ram, storage" in str(error)
