# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base class for cloneable biome templates.

A template is configured once and then used as the source for any number of
independent copies. Templates are immutable (frozen=True from Model), so a
variation is expressed as a new copy with updated attributes rather than by
mutating the original.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional

from ..core.primitives import BiomeKindEnum, Model

logger = logging.getLogger(__name__)


class BiomeBase(Model, ABC):
    """
    Abstract base class for all biome templates.

    Subclasses must implement:
    - describe(): One-line human-readable description of the biome
    """

    kind: ClassVar[BiomeKindEnum]

    @abstractmethod
    def describe(self) -> str:
        """Return the biome's one-line description."""
        pass

    def clone(self, *, updates: Optional[Dict[str, Any]] = None) -> "BiomeBase":
        """
        Return an independent deep copy of this template.

        Args:
            updates: Optional field values applied to the copy only

        Raises:
            ValueError: If updates name attributes the biome does not have
            ValidationError: If an updated value is invalid for its attribute

        Returns:
            A new biome of the same type; the template itself is untouched

        Example:
            ```python
            pine = Forest(tree_type="Pine", wildlife="Deer")
            oak = pine.clone(updates={"tree_type": "Oak"})
            oak.describe()   # "Forest with Oak trees and Deer wildlife."
            pine.describe()  # "Forest with Pine trees and Deer wildlife."
            ```
        """
        if updates:
            unknown = set(updates) - set(type(self).model_fields)
            if unknown:
                raise ValueError(
                    f"Unknown {type(self).__name__} attribute(s): {', '.join(sorted(unknown))}"
                )
        logger.debug(f"Cloning {type(self).__name__} template")
        clone = self.copy()
        if updates:
            # model_copy skips validation; rebuild so updated values are checked
            clone = type(self).model_validate({**clone.model_dump(), **updates})
        return clone

    def print(self) -> None:
        """Write the description to standard output."""
        print(self.describe())
