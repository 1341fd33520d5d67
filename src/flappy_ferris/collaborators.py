"""
collaborators.py: The narrow interfaces the simulation uses to talk to input
and audio, plus plain implementations for headless runs and tests.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)


class SoundEvent(Enum):
    BOOST_COLLECTED = "boost"
    DEATH = "death"


class JumpInput(Protocol):
    """A single binary jump signal, sampled once per frame."""

    def is_jump_pressed(self) -> bool:
        """True on the frame the jump was triggered."""
        ...

    def is_jump_held(self) -> bool:
        """True while the jump key is down."""
        ...


class AudioSink(Protocol):
    def play(self, event: SoundEvent) -> None:
        ...


@dataclass
class ScriptedInput:
    """Input whose level and edge are set directly by the caller."""
    pressed: bool = False
    held: bool = False

    def is_jump_pressed(self) -> bool:
        return self.pressed

    def is_jump_held(self) -> bool:
        return self.held

    def press(self):
        self.pressed = True
        self.held = True

    def release(self):
        self.pressed = False
        self.held = False


class SilentAudio:
    """Drops every sound; used when no audio device or resources are set up."""

    def play(self, event: SoundEvent) -> None:
        logger.debug("Sound %s dropped (no audio backend)", event.value)
