# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Multimedia player products.

Each concrete player belongs to exactly one platform family, reported by its
``platform`` property. The video and audio roles are abstract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from ..core.primitives import Model, PlatformEnum


class PlayerBase(Model, ABC):
    """
    Stateless player whose ``play()`` prints a fixed line.

    Subclasses must implement:
    - platform: The platform family the player belongs to
    """

    media: ClassVar[str]

    @property
    @abstractmethod
    def platform(self) -> PlatformEnum:
        pass

    def describe(self) -> str:
        return f"Playing {self.media} on {self.platform.value}."

    def play(self) -> None:
        print(self.describe())


class VideoPlayer(PlayerBase):
    media: ClassVar[str] = "video"


class AudioPlayer(PlayerBase):
    media: ClassVar[str] = "audio"


class WindowsVideoPlayer(VideoPlayer):
    @property
    def platform(self) -> PlatformEnum:
        return PlatformEnum.WINDOWS


class MacVideoPlayer(VideoPlayer):
    @property
    def platform(self) -> PlatformEnum:
        return PlatformEnum.MAC


class WindowsAudioPlayer(AudioPlayer):
    @property
    def platform(self) -> PlatformEnum:
        return PlatformEnum.WINDOWS


class MacAudioPlayer(AudioPlayer):
    @property
    def platform(self) -> PlatformEnum:
        return PlatformEnum.MAC
