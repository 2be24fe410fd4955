# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Prototype registry for biome templates.

New biomes are produced by copying a registered template rather than by
constructing one from scratch. The registry is an ordinary object owned by
its caller; there is no process-wide instance.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List

import pandas as pd

from ..core.exceptions import NotFoundError
from .base import BiomeBase
from .biomes import Desert, Forest, Ocean

logger = logging.getLogger(__name__)


class BiomeRegistry:
    """
    Name-to-template mapping that hands out independent clones.

    The registry owns its stored templates for its own lifetime and drops them
    on ``close()`` (or on leaving a ``with`` block).

    Example:
        ```python
        with BiomeRegistry() as registry:
            registry.register("Forest", Forest(tree_type="Pine", wildlife="Deer"))
            forest = registry.create("Forest")
            forest.print()  # Forest with Pine trees and Deer wildlife.
        ```
    """

    def __init__(self) -> None:
        self._templates: Dict[str, BiomeBase] = {}

    @classmethod
    def with_defaults(cls) -> "BiomeRegistry":
        """Registry pre-loaded with the standard Forest, Desert and Ocean templates."""
        registry = cls()
        registry.register("Forest", Forest(tree_type="Pine", wildlife="Deer"))
        registry.register("Desert", Desert(sand_type="Golden", climate="Hot"))
        registry.register("Ocean", Ocean(water_type="Salt", marine_life="Fish"))
        return registry

    def register(self, name: str, template: BiomeBase) -> None:
        """
        Store a template under ``name``, replacing any existing entry.

        Raises:
            TypeError: If ``template`` is not a BiomeBase instance
        """
        if not isinstance(template, BiomeBase):
            raise TypeError(
                f"BiomeRegistry templates must be BiomeBase instances, got {type(template).__name__}"
            )
        if name in self._templates:
            logger.info(f"Replacing biome template '{name}'")
        self._templates[name] = template
        logger.debug(f"Registered {type(template).__name__} template as '{name}'")

    def create(self, name: str) -> BiomeBase:
        """
        Return a new, independently owned copy of the template named ``name``.

        Raises:
            NotFoundError: If nothing is registered under ``name``
        """
        template = self._templates.get(name)
        if template is None:
            raise NotFoundError(name, self._templates, kind="biome template")
        return template.clone()

    def unregister(self, name: str) -> BiomeBase:
        """Remove and return the template named ``name``."""
        try:
            return self._templates.pop(name)
        except KeyError:
            raise NotFoundError(name, self._templates, kind="biome template") from None

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._templates)

    def clear(self) -> None:
        self._templates.clear()

    def close(self) -> None:
        """Release every stored template."""
        if self._templates:
            logger.debug(f"Releasing {len(self._templates)} biome template(s)")
        self.clear()

    def to_frame(self) -> pd.DataFrame:
        """
        Catalog of registered templates as a DataFrame.

        Returns:
            DataFrame with columns ``name``, ``kind`` and ``description``,
            one row per template in registration order
        """
        rows = [
            {
                "name": name,
                "kind": template.kind.value,
                "description": template.describe(),
            }
            for name, template in self._templates.items()
        ]
        return pd.DataFrame(rows, columns=["name", "kind", "description"])

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._templates))

    def __enter__(self) -> "BiomeRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"BiomeRegistry(names={self.names()!r})"
