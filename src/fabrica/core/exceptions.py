# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised by Fabrica components.
"""

from __future__ import annotations

from typing import Iterable, List


class NotFoundError(KeyError):
    """
    Raised when a lookup by key finds no registered entry.

    Subclasses KeyError so callers treating registries like mappings can
    catch it the usual way.

    Attributes:
        key: The key that was looked up
        available: Keys that were registered at lookup time
    """

    def __init__(self, key: object, available: Iterable[object] = (), kind: str = "entry"):
        self.key = key
        self.available: List[object] = list(available)
        self.kind = kind
        super().__init__(key)

    def __str__(self) -> str:
        registered = ", ".join(repr(k) for k in self.available) or "none"
        return f"No {self.kind} registered under {self.key!r} (registered: {registered})"


class IncompleteBuildError(ValueError):
    """Raised when a strictly retrieved product is missing required parts."""

    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(f"Product is missing required parts: {', '.join(self.missing)}")
