"""
audio.py: Fire-and-forget sound effects backed by pygame.mixer.
"""

import logging
from pathlib import Path
from typing import Dict, Protocol

import pygame

from .constants import SOUND_NAMES

logger = logging.getLogger(__name__)

SOUND_EXTENSIONS = (".ogg", ".wav")


class AudioSink(Protocol):
    """Anything the simulation can ask to play a named sound."""

    def play(self, name: str) -> None:
        """Start the sound; unknown or unloaded names are ignored."""


class SilentAudio:
    """Sink used when sound is muted or no mixer is available."""

    def play(self, name: str) -> None:
        return None


class SoundBank:
    """Holds loaded pygame sounds. Sounds that never loaded are skipped on play."""

    def __init__(self):
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.enabled = self._init_mixer()

    @staticmethod
    def _init_mixer() -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio disabled, mixer unavailable: %s", e)
            return False
        return True

    def register(self, name: str, path: Path) -> bool:
        if name not in SOUND_NAMES:
            raise ValueError(f"Unknown sound name: {name!r}")
        if not self.enabled:
            return False
        try:
            self.sounds[name] = pygame.mixer.Sound(str(path))
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Could not load sound %s from %s: %s", name, path, e)
            return False
        return True

    def load_directory(self, directory: Path) -> int:
        """Loads sfx_<name>.ogg (or .wav) for every known sound. Returns how many loaded."""
        loaded = 0
        for name in SOUND_NAMES:
            for ext in SOUND_EXTENSIONS:
                path = Path(directory) / f"sfx_{name}{ext}"
                if path.exists() and self.register(name, path):
                    loaded += 1
                    break
            else:
                logger.warning("Sound %s not available in %s", name, directory)
        logger.info("Loaded %d/%d sounds", loaded, len(SOUND_NAMES))
        return loaded

    def play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()
