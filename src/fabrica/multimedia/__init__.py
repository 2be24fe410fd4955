# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fabrica Abstract Factory Pattern

Platform-specific multimedia factories producing matching video and audio
players:

    factory = WindowsMultimediaFactory()
    factory.create_video_player().play()  # Playing video on Windows.
    factory.create_audio_player().play()  # Playing audio on Windows.
"""

from .factories import (
    MULTIMEDIA_FACTORY_REGISTRY,
    MacMultimediaFactory,
    MultimediaFactory,
    WindowsMultimediaFactory,
    get_multimedia_factory,
    register_multimedia_factory,
)
from .players import (
    AudioPlayer,
    MacAudioPlayer,
    MacVideoPlayer,
    PlayerBase,
    VideoPlayer,
    WindowsAudioPlayer,
    WindowsVideoPlayer,
)

__all__ = [
    # Products
    "PlayerBase",
    "VideoPlayer",
    "AudioPlayer",
    "WindowsVideoPlayer",
    "WindowsAudioPlayer",
    "MacVideoPlayer",
    "MacAudioPlayer",
    # Factories
    "MultimediaFactory",
    "WindowsMultimediaFactory",
    "MacMultimediaFactory",
    # Lookup
    "MULTIMEDIA_FACTORY_REGISTRY",
    "get_multimedia_factory",
    "register_multimedia_factory",
]
