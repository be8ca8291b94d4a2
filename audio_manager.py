# audio_manager.py - Audio Management System
"""
Plays the game sounds using pygame.mixer.
Driven by the events the simulation emits each tick.
"""

import logging
import os
from typing import Iterable

import pygame  # Audio library

from config import SOUND_FILES, audio_path
from events import GoalReached, LevelCompleted, Liftoff, NewHighscore, Thruster

logger = logging.getLogger(__name__)


class AudioManager:
    """Manages all game sounds via pygame.mixer."""

    def __init__(self, enabled: bool = True) -> None:
        """Initialize audio system and load sound assets."""
        self.sound_enabled: bool = enabled

        # 44.1kHz, 16-bit, stereo, small buffer for a responsive thruster
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
        except pygame.error as exc:
            logger.warning("Audio unavailable: %s", exc)

        self.snd_thruster = self._load_sound(SOUND_FILES["thruster"])  # Engine loop
        self.snd_liftoff = self._load_sound(SOUND_FILES["liftoff"])  # Run timer starts
        self.snd_goal = self._load_sound(SOUND_FILES["goal"])
        self.snd_completed = self._load_sound(SOUND_FILES["completed"])
        self.snd_highscore = self._load_sound(SOUND_FILES["highscore"])

        self.thruster_playing = False  # Loop currently running

    def _load_sound(self, filename: str):
        """Load a sound file, return None if file missing or invalid."""
        path = audio_path(filename)
        if not os.path.exists(path):
            return None
        try:
            return pygame.mixer.Sound(path)
        except pygame.error as exc:
            logger.warning("Could not load %s: %s", path, exc)
            return None

    # --------- Sound Effects --------- #
    def play_sfx(self, snd) -> None:
        """Play a sound effect if sound is enabled."""
        if not self.sound_enabled or snd is None:
            return
        snd.play()

    # --------- Thruster --------- #
    def start_thruster(self) -> None:
        if not self.sound_enabled or self.snd_thruster is None or self.thruster_playing:
            return
        self.snd_thruster.play(loops=-1)  # -1 = loop until stopped
        self.thruster_playing = True

    def stop_thruster(self) -> None:
        if self.snd_thruster is not None and self.thruster_playing:
            self.snd_thruster.stop()
        self.thruster_playing = False

    def handle_events(self, events: Iterable) -> None:
        """React to the events of one tick."""
        for event in events:
            if event is Thruster.FIRING:
                self.start_thruster()
            elif event is Thruster.STOPPED:
                self.stop_thruster()
            elif isinstance(event, Liftoff):
                self.play_sfx(self.snd_liftoff)
            elif isinstance(event, GoalReached):
                self.play_sfx(self.snd_goal)
            elif isinstance(event, NewHighscore):
                self.play_sfx(self.snd_highscore)
            elif isinstance(event, LevelCompleted):
                self.play_sfx(self.snd_completed)

    # --------- Global Sound Control --------- #
    def toggle_sound(self) -> bool:
        """
        Toggle sound on/off globally.

        Returns:
            bool: True if sound is enabled after toggle, False if disabled.
        """
        self.sound_enabled = not self.sound_enabled
        if not self.sound_enabled:
            self.stop_thruster()
        return self.sound_enabled

    def shutdown(self) -> None:
        self.stop_thruster()
        pygame.mixer.quit()
