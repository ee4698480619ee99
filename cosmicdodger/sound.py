"""Playback of short sound effects."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, ClassVar, Optional

import pygame

SOUND_FINISHED = pygame.USEREVENT + 1


class AudioChannel(IntEnum):
    MASTER = 1
    MUSIC = 2
    SFX = 3


class Sound:
    """A sound effect played at a fixed volume.

    The finished callback is shared by every sound: setting it on one
    instance replaces it for all of them.
    """

    _callback: ClassVar[Optional[Callable[[], None]]] = None

    def __init__(self, audio, volume: float = 1.0, looping: bool = False) -> None:
        if audio is None:
            raise ValueError("a sound needs audio data")
        self._audio = audio
        self._channel = None
        self._looping = looping
        self.volume = volume

    @property
    def looping(self) -> bool:
        return self._looping

    def play(self) -> None:
        """Play the sound on the first free channel."""
        self._audio.set_volume(self.volume)
        self._channel = self._audio.play(loops=-1 if self._looping else 0)
        if self._channel is not None:
            self._channel.set_endevent(SOUND_FINISHED)

    def is_playing(self) -> bool:
        if self._channel is None:
            return False
        return bool(self._channel.get_busy())

    def set_volume(self, volume: float) -> None:
        """Set the volume of the playing channel, or of every channel if never played."""
        if self._channel is not None:
            self._channel.set_volume(volume)
            return
        for number in range(pygame.mixer.get_num_channels()):
            pygame.mixer.Channel(number).set_volume(volume)

    def set_on_finished_callback(self, callback: Optional[Callable[[], None]]) -> None:
        Sound._callback = callback

    @classmethod
    def _audio_finished(cls, channel: int) -> None:
        if cls._callback is not None:
            cls._callback()