"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import (
    BOOST_FIRST_SPAWN, BOOST_HEIGHT, BOOST_WIDTH, BONUS_LIFE_THRESHOLD,
    DEFAULT_MULTIPLIER, ENEMY_FIRST_SPAWN, ENEMY_HEIGHT, ENEMY_WIDTH,
    FERRIS_HEIGHT, FERRIS_WIDTH, FERRIS_X, MIDDLE, PIPE_FIRST_SPAWN, PIPE_GAP,
    PIPE_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH, SPEED_UP_THRESHOLD, STARTING_LIVES
)


class PlayState(Enum):
    """States the game could be in."""
    START_SCREEN = "start_screen"
    PLAY = "play"
    DEAD = "dead"

    @property
    def is_playing(self) -> bool:
        return self is PlayState.PLAY


class BoostType(Enum):
    """Different types of boosts."""
    SPEED_UP = "speed_up"
    SLOW_DOWN = "slow_down"
    BONUS_LIFE = "bonus_life"

    @classmethod
    def from_draw(cls, value: float) -> "BoostType":
        """Classifies the secondary random draw taken when a boost spawns."""
        if value < BONUS_LIFE_THRESHOLD:
            return cls.BONUS_LIFE
        if value < SPEED_UP_THRESHOLD:
            return cls.SPEED_UP
        return cls.SLOW_DOWN


@dataclass
class Rect:
    """Axis-aligned rectangle used as a hitbox."""
    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def translate(self, dx: float, dy: float):
        self.x += dx
        self.y += dy

    def overlaps(self, other: "Rect") -> bool:
        """Strict overlap: rectangles that only share an edge do not collide."""
        return (self.left < other.right and self.right > other.left
                and self.top < other.bottom and self.bottom > other.top)


@dataclass
class Physics:
    """Vertical motion of the player. Only y-based movement is needed."""
    velocity: float = 0.0
    acceleration: float = 0.0


def _player_zone() -> Rect:
    return Rect(FERRIS_X - FERRIS_WIDTH / 2.0, MIDDLE - FERRIS_HEIGHT / 2.0,
                FERRIS_WIDTH, FERRIS_HEIGHT)


@dataclass
class PlayerEntity:
    """The player. X is fixed; the zone follows y by a constant offset."""
    x: float = FERRIS_X
    y: float = MIDDLE
    physics: Physics = field(default_factory=Physics)
    zone: Rect = field(default_factory=_player_zone)
    can_jump: bool = True


@dataclass
class PipeEntity:
    """
    A pipe pair. `y` is where the gap starts; the top zone spans the screen
    top down to it and the bottom zone spans from the gap end to the bottom.
    """
    x: float
    y: float
    top_zone: Rect
    bottom_zone: Rect
    is_passed: bool = False

    @classmethod
    def spawn(cls, y: float) -> "PipeEntity":
        return cls(
            x=SCREEN_WIDTH + PIPE_WIDTH / 2.0,
            y=y,
            top_zone=Rect(SCREEN_WIDTH, 0.0, PIPE_WIDTH, y),
            bottom_zone=Rect(SCREEN_WIDTH, y + PIPE_GAP, PIPE_WIDTH,
                             SCREEN_HEIGHT - y - PIPE_GAP),
        )


@dataclass
class EnemyEntity:
    x: float
    y: float
    zone: Rect
    is_passed: bool = False

    @classmethod
    def spawn(cls, y: float) -> "EnemyEntity":
        return cls(
            x=SCREEN_WIDTH + ENEMY_WIDTH / 2.0,
            y=y,
            zone=Rect(SCREEN_WIDTH, y - ENEMY_HEIGHT / 2.0, ENEMY_WIDTH, ENEMY_HEIGHT),
        )


@dataclass
class BoostEntity:
    x: float
    y: float
    zone: Rect
    effect: BoostType
    is_passed: bool = False
    is_collected: bool = False

    @classmethod
    def spawn(cls, y: float, effect: BoostType) -> "BoostEntity":
        return cls(
            x=SCREEN_WIDTH + BOOST_WIDTH / 2.0,
            y=y,
            zone=Rect(SCREEN_WIDTH, y - BOOST_HEIGHT / 2.0, BOOST_WIDTH, BOOST_HEIGHT),
            effect=effect,
        )


@dataclass
class SessionState:
    """
    Everything one running game owns: the player, the entity queues (oldest
    first, which is also left-to-right on screen), the spawn countdowns and
    the scalar bookkeeping. Only `best_score` and `rng` survive a restart.
    """
    player: PlayerEntity = field(default_factory=PlayerEntity)
    pipes: List[PipeEntity] = field(default_factory=list)
    enemies: List[EnemyEntity] = field(default_factory=list)
    boosts: List[BoostEntity] = field(default_factory=list)

    # Countdowns in seconds; each frame's length is subtracted while playing.
    time_until_next_pipe: float = PIPE_FIRST_SPAWN
    time_until_next_enemy: float = ENEMY_FIRST_SPAWN
    time_until_next_boost: float = BOOST_FIRST_SPAWN

    has_boost: bool = False
    boost_duration: float = 0.0
    multiplier: float = DEFAULT_MULTIPLIER

    # Fatal faults raised during the current frame's collision pass.
    hit_pipe: bool = False
    hit_enemy: bool = False

    play_state: PlayState = PlayState.START_SCREEN

    lives: int = STARTING_LIVES
    score: int = 0
    best_score: int = 0

    rng: random.Random = field(default_factory=random.Random)
