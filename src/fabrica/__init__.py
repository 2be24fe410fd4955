# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fabrica - Creational Design Pattern Toolkit

Four independent, minimal illustrations of object-creation patterns:

- fabrica.prototype  - Prototype registry (biome cloning)
- fabrica.builder    - Builder and Director (computer assembly)
- fabrica.reports    - Factory Method (report generation)
- fabrica.multimedia - Abstract Factory (multimedia playback)

Example Usage:
    ```python
    from fabrica.prototype import BiomeRegistry, Forest

    registry = BiomeRegistry()
    registry.register("Forest", Forest(tree_type="Pine", wildlife="Deer"))
    registry.create("Forest").print()
    # Forest with Pine trees and Deer wildlife.
    ```

Run every demonstration with ``python -m fabrica``.
"""

import importlib
import logging

# Libraries should not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "builder",
    "core",
    "demo",
    "multimedia",
    "prototype",
    "reports",
]


_LAZY_MODULES = {
    "builder": "fabrica.builder",
    "core": "fabrica.core",
    "demo": "fabrica.demo",
    "multimedia": "fabrica.multimedia",
    "prototype": "fabrica.prototype",
    "reports": "fabrica.reports",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'fabrica' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
