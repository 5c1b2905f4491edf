"""Sound effects and background music bookkeeping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from types import MappingProxyType
from typing import ClassVar, Mapping

from .exceptions import ResourceNotFoundException

_log = logging.getLogger(__name__)

_GAME_SOUNDS = (
    ("game_start", "loop_sound.mp3"),
    ("crash", "crash_sound.mp3"),
    ("drive", "move_sound.mp3"),
    ("victory", "victory_sound.mp3"),
    ("moving_car", "m_car_sound.mp3"),
    ("gameover", "gameover_sound.mp3"),
)
_BACKGROUND_MUSIC_FILE = "loop_sound.mp3"
_MUSIC_VOLUME_FACTOR = 0.7


def _clamp_volume(volume: float) -> float:
    return max(0.0, min(100.0, volume))


def _read_audio(resource_id: str, filename: str) -> bytes:
    try:
        return Path(filename).read_bytes()
    except OSError as exc:
        raise ResourceNotFoundException(resource_id, filename) from exc


class _Status(Enum):
    STOPPED = auto()
    PAUSED = auto()
    PLAYING = auto()


@dataclass
class _Channel:
    """One playable sound or music stream and its playback state."""

    data: bytes = b""
    volume: float = 100.0
    loop: bool = False
    status: _Status = _Status.STOPPED

    @property
    def playing(self) -> bool:
        return self.status is _Status.PLAYING

    @property
    def paused(self) -> bool:
        return self.status is _Status.PAUSED

    def play(self) -> None:
        self.status = _Status.PLAYING

    def pause(self) -> None:
        if self.status is _Status.PLAYING:
            self.status = _Status.PAUSED

    def stop(self) -> None:
        self.status = _Status.STOPPED


class SoundManager:
    """Loads sounds by id and tracks which ones play, loop and how loud."""

    _instance: ClassVar[SoundManager | None] = None

    def __init__(self) -> None:
        self._sounds: dict[str, _Channel] = {}
        self._is_playing: dict[str, bool] = {}
        self._music = _Channel()
        self._master_volume = 100.0
        self._muted = False
        self._current_background = ""

    @classmethod
    def get_instance(cls) -> SoundManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def shutdown(cls) -> None:
        """Stop everything and drop the shared manager."""
        if cls._instance is not None:
            cls._instance.stop_background_music()
            cls._instance.stop_all_sounds()
            cls._instance.unload_all_sounds()
            cls._instance = None

    @property
    def sounds(self) -> Mapping[str, _Channel]:
        return MappingProxyType(self._sounds)

    @property
    def music(self) -> _Channel:
        return self._music

    @property
    def master_volume(self) -> float:
        return self._master_volume

    @property
    def muted(self) -> bool:
        return self._muted

    @property
    def current_background_sound(self) -> str:
        return self._current_background

    @property
    def loaded_sound_count(self) -> int:
        return len(self._sounds)

    def load_sound(self, sound_id: str, filename: str) -> None:
        """Load a sound under an id; an id already loaded is left as it is."""
        if self.has_sound(sound_id):
            return
        data = _read_audio(sound_id, filename)
        self._sounds[sound_id] = _Channel(data=data, volume=self._master_volume)
        self._is_playing[sound_id] = False

    def load_music(self, filename: str) -> None:
        data = _read_audio("background_music", filename)
        self._music = _Channel(data=data, volume=self._master_volume * _MUSIC_VOLUME_FACTOR)

    def play_sound(self, sound_id: str) -> None:
        if self._muted:
            return
        channel = self._sounds.get(sound_id)
        if channel is not None:
            channel.play()
            self._is_playing[sound_id] = True

    def play_background_loop(self, sound_id: str) -> None:
        """Loop a sound in the background, replacing the current loop."""
        if self._muted:
            return
        if self._current_background == sound_id and self.is_currently_playing(sound_id):
            return
        if self._current_background:
            self.stop_sound(self._current_background)
        channel = self._sounds.get(sound_id)
        if channel is None:
            return
        factor = 0.8 if sound_id == "drive" else 0.3
        channel.volume = self._master_volume * factor
        channel.loop = True
        channel.play()
        self._current_background = sound_id
        self._is_playing[sound_id] = True

    def switch_background_loop(self, new_sound_id: str) -> None:
        if self._current_background != new_sound_id:
            self.play_background_loop(new_sound_id)

    def is_currently_playing(self, sound_id: str) -> bool:
        channel = self._sounds.get(sound_id)
        return channel is not None and channel.playing

    def update(self) -> None:
        """Notice sounds that have stopped and forget a finished background loop."""
        for sound_id, was_playing in self._is_playing.items():
            now_playing = self.is_currently_playing(sound_id)
            if was_playing and not now_playing and sound_id == self._current_background:
                self._current_background = ""
            self._is_playing[sound_id] = now_playing

    def stop_sound(self, sound_id: str) -> None:
        channel = self._sounds.get(sound_id)
        if channel is None:
            return
        channel.stop()
        self._is_playing[sound_id] = False
        if sound_id == self._current_background:
            self._current_background = ""

    def stop_all_background_sounds(self) -> None:
        if not self._current_background:
            return
        channel = self._sounds.get(self._current_background)
        if channel is not None:
            channel.stop()
            channel.loop = False
            self._is_playing[self._current_background] = False
        self._current_background = ""

    def stop_all_sounds(self) -> None:
        for channel in self._sounds.values():
            channel.stop()
        for sound_id in self._is_playing:
            self._is_playing[sound_id] = False
        self._current_background = ""

    def play_background_music(self, loop: bool = True) -> None:
        if self._muted:
            return
        self._music.loop = loop
        self._music.play()

    def stop_background_music(self) -> None:
        self._music.stop()

    def pause_background_music(self) -> None:
        self._music.pause()

    def resume_background_music(self) -> None:
        if not self._muted:
            self._music.play()

    def set_master_volume(self, volume: float) -> None:
        """Set the master volume (0-100) and apply it to every sound and the music."""
        self._master_volume = _clamp_volume(volume)
        for channel in self._sounds.values():
            channel.volume = self._master_volume
        self._music.volume = self._master_volume * _MUSIC_VOLUME_FACTOR

    def set_sound_volume(self, sound_id: str, volume: float) -> None:
        channel = self._sounds.get(sound_id)
        if channel is not None:
            channel.volume = _clamp_volume(volume)

    def set_music_volume(self, volume: float) -> None:
        self._music.volume = _clamp_volume(volume)

    def set_muted(self, muted: bool) -> None:
        """Mute (stopping sounds and pausing music) or unmute (resuming paused music)."""
        self._muted = muted
        if muted:
            self.stop_all_sounds()
            self.pause_background_music()
        elif self._music.paused:
            self.resume_background_music()

    def has_sound(self, sound_id: str) -> bool:
        return sound_id in self._sounds

    def unload_sound(self, sound_id: str) -> None:
        self.stop_sound(sound_id)
        self._sounds.pop(sound_id, None)
        self._is_playing.pop(sound_id, None)

    def unload_all_sounds(self) -> None:
        self.stop_all_sounds()
        self._sounds.clear()
        self._is_playing.clear()

    def load_all_game_sounds(self) -> None:
        """Load the game's sounds and music from the working directory, skipping missing files."""
        for sound_id, filename in _GAME_SOUNDS:
            try:
                self.load_sound(sound_id, filename)
            except ResourceNotFoundException:
                _log.warning("Could not load sound %s from %s", sound_id, filename)
        try:
            self.load_music(_BACKGROUND_MUSIC_FILE)
        except ResourceNotFoundException:
            _log.warning("Could not load background music")