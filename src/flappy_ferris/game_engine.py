"""
game_engine.py: The session controller. Owns the whole game state and runs
one fixed-order update pass per frame.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .collaborators import AudioSink, JumpInput, SilentAudio, SoundEvent
from .collisions import is_over, prune, resolve_boosts, resolve_enemies, resolve_pipes
from .constants import DEFAULT_MULTIPLIER
from .data_models import PlayState, SessionState
from .physics_core import PhysicsCore
from .spawner import Spawner

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    The authoritative engine managing the entire game state.
    Inherits the per-entity kinematics from PhysicsCore.
    """
    audio: AudioSink = field(default_factory=SilentAudio)
    seed: Optional[int] = None
    state: SessionState = field(default_factory=SessionState, init=False)
    spawner: Spawner = field(default_factory=Spawner, init=False)
    frame_count: int = field(default=0, init=False)

    def __post_init__(self):
        self.state = SessionState(rng=random.Random(self.seed))

    def step(self, delta: float, jump: JumpInput):
        """
        Advances the game by one frame.

        Order matters for replays and for the edge cases: restart, timers,
        boost expiry, spawns, player, ground reprieve, state change, pipes,
        enemies, boosts, game-over check, prune.
        """
        if delta < 0:
            raise ValueError(f"Frame delta must not be negative, got {delta}")

        state = self.state
        self.frame_count += 1

        # 1. A frame that begins on the game-over screen resets the round.
        if state.play_state is PlayState.DEAD:
            self.restart()
            state = self.state

        # 2. Countdowns and boost expiry
        self.spawner.advance_timers(state, delta)
        self.expire_boost(delta)

        # 3. New entities
        self.spawner.spawn(state)

        # 4. Player (the returned state is applied after the ground check)
        new_state = self.step_player(state.player, jump, state.play_state)

        if self.hits_ground(state.player) and state.lives > 1:
            self.prevent_hitting_ground(state.player)
            state.lives -= 1
            logger.debug("Ground hit absorbed, %d lives left", state.lives)

        if not state.play_state.is_playing and new_state.is_playing:
            state.play_state = PlayState.PLAY
            logger.info("Round started")

        # 5. Move, collide and mark every entity queue
        resolve_pipes(self, state)
        resolve_enemies(self, state)
        resolve_boosts(self, state, self.audio)

        # 6. Game over
        if is_over(self, state):
            self.audio.play(SoundEvent.DEATH)
            state.play_state = PlayState.DEAD
            logger.info("Game over with score %d", state.score)

        # 7. Drop everything that was passed or collected
        prune(state)

    def expire_boost(self, delta: float):
        """Counts down an active boost and removes it once it runs out."""
        state = self.state
        if not state.has_boost:
            return
        state.boost_duration -= delta
        if state.boost_duration <= 0.0:
            state.has_boost = False
            state.multiplier = DEFAULT_MULTIPLIER
            logger.info("Speed boost expired")

    def swap_scores(self):
        """Updates the best score after a round ends."""
        state = self.state
        if state.score > state.best_score:
            state.best_score = state.score

    def restart(self):
        """
        Resets the round. The best score is carried over (after being updated)
        and so is the random generator. The state is left as DEAD so the
        game-over overlay stays up until the next jump starts play.
        """
        self.swap_scores()
        old = self.state
        self.state = SessionState(best_score=old.best_score, rng=old.rng,
                                  play_state=PlayState.DEAD)
        if old.score or old.pipes or old.enemies or old.boosts:
            logger.info("Round reset, best score %d", old.best_score)
