"""Sound playback and asset loading on top of pygame."""

from __future__ import annotations

import enum
import os
from typing import Any

import pygame


class SoundStatus(enum.Enum):
    STOPPED = "stopped"
    PLAYING = "playing"


class Sound:
    """A playable clip with a 0-100 volume and optional looping."""

    def __init__(self, clip: Any, loop: bool = False) -> None:
        self._clip = clip
        self.loop = loop
        self._channel: Any = None
        self._volume = 100.0
        clip.set_volume(1.0)

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = max(0.0, min(100.0, float(value)))
        self._clip.set_volume(self._volume / 100.0)

    @property
    def status(self) -> SoundStatus:
        channel = self._channel
        if channel is not None and channel.get_busy() and channel.get_sound() is self._clip:
            return SoundStatus.PLAYING
        return SoundStatus.STOPPED

    def play(self) -> None:
        """Start playing from the beginning."""
        self.stop()
        self._channel = self._clip.play(loops=-1 if self.loop else 0)

    def stop(self) -> None:
        self._clip.stop()
        self._channel = None


def _require_file(path: str) -> None:
    if not os.path.isfile(path):
        raise FileNotFoundError(path)


class PygameMedia:
    """Loads sounds, fonts and images from disk with pygame."""

    def load_sound(self, path: str, loop: bool = False) -> Sound:
        _require_file(path)
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        try:
            clip = pygame.mixer.Sound(path)
        except pygame.error as exc:
            raise OSError(f"cannot load sound {path}") from exc
        return Sound(clip, loop)

    def load_font(self, path: str, size: int) -> pygame.font.Font:
        _require_file(path)
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            return pygame.font.Font(path, size)
        except pygame.error as exc:
            raise OSError(f"cannot load font {path}") from exc

    def load_image(self, path: str) -> pygame.Surface:
        _require_file(path)
        try:
            image = pygame.image.load(path)
        except pygame.error as exc:
            raise OSError(f"cannot load image {path}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image