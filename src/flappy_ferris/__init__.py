"""
Flappy Ferris: a side-scrolling jump-and-dodge arcade game.
"""

from .collaborators import ScriptedInput, SilentAudio, SoundEvent
from .data_models import BoostType, PlayState, SessionState
from .game_engine import GameEngine

__all__ = [
    "BoostType", "GameEngine", "PlayState", "ScriptedInput", "SessionState",
    "SilentAudio", "SoundEvent",
]
