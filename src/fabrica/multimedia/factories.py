# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Multimedia factories.

A factory creates a consistent family of players: the video and audio players
from one factory always target the same platform, so callers swap an entire
family by swapping the factory.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Dict, Type, Union

from ..core.exceptions import NotFoundError
from ..core.primitives import PlatformEnum
from .players import (
    AudioPlayer,
    MacAudioPlayer,
    MacVideoPlayer,
    VideoPlayer,
    WindowsAudioPlayer,
    WindowsVideoPlayer,
)

logger = logging.getLogger(__name__)


class MultimediaFactory(ABC):
    """
    Abstract base class for multimedia factories.

    Subclasses must implement:
    - create_video_player(): New video player for the factory's platform
    - create_audio_player(): New audio player for the factory's platform
    """

    platform: ClassVar[PlatformEnum]

    @abstractmethod
    def create_video_player(self) -> VideoPlayer:
        pass

    @abstractmethod
    def create_audio_player(self) -> AudioPlayer:
        pass


MULTIMEDIA_FACTORY_REGISTRY: Dict[PlatformEnum, Type[MultimediaFactory]] = {}


def register_multimedia_factory(platform: PlatformEnum) -> Callable:
    """
    A decorator to register a multimedia factory class for a platform.

    The factory must declare the same ``platform`` and its products are
    checked against it at registration, so a factory that would mix families
    is rejected up front.
    """

    def decorator(factory_cls: Type[MultimediaFactory]) -> Type[MultimediaFactory]:
        if platform in MULTIMEDIA_FACTORY_REGISTRY:
            raise ValueError(f"Multimedia factory for {platform.value} is already registered.")
        declared = getattr(factory_cls, "platform", None)
        if declared != platform:
            raise TypeError(
                f"{factory_cls.__name__} declares platform {declared!r}, expected {platform.value}"
            )
        factory = factory_cls()
        products = (
            (factory.create_video_player(), VideoPlayer),
            (factory.create_audio_player(), AudioPlayer),
        )
        for product, role in products:
            if not isinstance(product, role):
                raise TypeError(
                    f"{factory_cls.__name__} returned {type(product).__name__}, expected a {role.__name__}"
                )
            if product.platform != platform:
                raise TypeError(
                    f"{factory_cls.__name__} creates {type(product).__name__} "
                    f"for {product.platform.value}, expected {platform.value}"
                )
        MULTIMEDIA_FACTORY_REGISTRY[platform] = factory_cls
        return factory_cls

    return decorator


def get_multimedia_factory(platform: Union[PlatformEnum, str]) -> MultimediaFactory:
    """
    Finds the factory registered for a platform and returns a new instance.

    Raises:
        NotFoundError: If no factory is registered for the platform
    """
    resolved = platform if isinstance(platform, PlatformEnum) else PlatformEnum.from_value(platform)
    factory_cls = MULTIMEDIA_FACTORY_REGISTRY.get(resolved) if resolved is not None else None

    if factory_cls is None:
        raise NotFoundError(
            platform,
            [p.value for p in MULTIMEDIA_FACTORY_REGISTRY],
            kind="multimedia factory",
        )

    logger.debug(f"Selected {factory_cls.__name__} for {resolved.value}")
    return factory_cls()


@register_multimedia_factory(PlatformEnum.WINDOWS)
class WindowsMultimediaFactory(MultimediaFactory):
    platform: ClassVar[PlatformEnum] = PlatformEnum.WINDOWS

    def create_video_player(self) -> VideoPlayer:
        return WindowsVideoPlayer()

    def create_audio_player(self) -> AudioPlayer:
        return WindowsAudioPlayer()


@register_multimedia_factory(PlatformEnum.MAC)
class MacMultimediaFactory(MultimediaFactory):
    platform: ClassVar[PlatformEnum] = PlatformEnum.MAC

    def create_video_player(self) -> VideoPlayer:
        return MacVideoPlayer()

    def create_audio_player(self) -> AudioPlayer:
        return MacAudioPlayer()
