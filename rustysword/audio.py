"""Named sound clips played through the mixer."""

from __future__ import annotations

import os
import time
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


class Audio:
    """A set of named sound clips.

    When no audio device can be opened, clips are still registered and
    checked, but playing them makes no sound.
    """

    def __init__(self) -> None:
        self._paths: dict[str, Path] = {}
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
        except pygame.error:
            self.enabled = False
        else:
            self.enabled = True

    def __contains__(self, name: object) -> bool:
        return name in self._paths

    def add(self, name: str, path: str | os.PathLike) -> None:
        """Register the clip at ``path`` under ``name``."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"sound clip not found: {path}")
        if self.enabled:
            try:
                self._sounds[name] = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                raise ValueError(f"cannot load sound clip {path}: {exc}") from exc
        self._paths[name] = path

    def play(self, name: str) -> None:
        """Start playing the clip registered as ``name``."""
        if name not in self._paths:
            raise KeyError(name)
        sound = self._sounds.get(name)
        if sound is not None:
            sound.play()

    @property
    def busy(self) -> bool:
        """True while any clip is still playing."""
        return self.enabled and bool(pygame.mixer.get_busy())

    def wait(self) -> None:
        """Block until every playing clip has finished."""
        while self.busy:
            time.sleep(0.01)