"""
collisions.py: Collision checks, their effects on lives/score/boosts, and
removal of finished entities.

Entities are only marked here (is_passed / is_collected); `prune` compacts
the queues afterwards so no queue is mutated while it is being scanned.
"""

import logging

from .collaborators import AudioSink, SoundEvent
from .constants import (
    BOOST_DURATION, BOOST_WIDTH, ENEMY_WIDTH, PIPE_WIDTH, SLOW_DOWN_MULTIPLIER,
    SPEED_UP_MULTIPLIER
)
from .data_models import BoostType, SessionState
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


def resolve_pipes(core: PhysicsCore, state: SessionState):
    """Moves every pipe, then applies hits and scoring in queue order."""
    zone = state.player.zone
    for pipe in state.pipes:
        core.step_pipe(pipe, state.multiplier)

        if zone.overlaps(pipe.top_zone) or zone.overlaps(pipe.bottom_zone):
            state.lives -= 1
            if state.lives > 0:
                pipe.is_passed = True
                logger.debug("Pipe hit absorbed, %d lives left", state.lives)
            else:
                state.hit_pipe = True

        if pipe.x <= -(PIPE_WIDTH / 2.0):
            state.score += 1
            pipe.is_passed = True


def resolve_enemies(core: PhysicsCore, state: SessionState):
    """Like pipes, but passing an enemy is worth nothing."""
    zone = state.player.zone
    for enemy in state.enemies:
        core.step_enemy(enemy, state.multiplier)

        if zone.overlaps(enemy.zone):
            state.lives -= 1
            if state.lives > 0:
                enemy.is_passed = True
                logger.debug("Enemy hit absorbed, %d lives left", state.lives)
            else:
                state.hit_enemy = True

        if enemy.x <= -(ENEMY_WIDTH / 2.0):
            enemy.is_passed = True


def resolve_boosts(core: PhysicsCore, state: SessionState, audio: AudioSink):
    zone = state.player.zone
    for boost in state.boosts:
        core.step_boost(boost)

        if zone.overlaps(boost.zone):
            boost.is_collected = True
            audio.play(SoundEvent.BOOST_COLLECTED)
            apply_boost(state, boost.effect)

        if boost.x <= -(BOOST_WIDTH / 2.0):
            boost.is_passed = True


def apply_boost(state: SessionState, effect: BoostType):
    if effect is BoostType.BONUS_LIFE:
        state.lives += 1
        logger.info("Bonus life collected, %d lives", state.lives)
    elif effect is BoostType.SLOW_DOWN:
        activate_boost(state, SLOW_DOWN_MULTIPLIER)
    elif effect is BoostType.SPEED_UP:
        activate_boost(state, SPEED_UP_MULTIPLIER)


def activate_boost(state: SessionState, multiplier: float):
    state.has_boost = True
    state.boost_duration = BOOST_DURATION
    state.multiplier = multiplier
    logger.info("Speed boost active, multiplier %.1f", multiplier)


def is_over(core: PhysicsCore, state: SessionState) -> bool:
    """Checks if the player lost the current game."""
    return state.play_state.is_playing and (
        core.hits_ground(state.player) or state.hit_pipe or state.hit_enemy)


def prune(state: SessionState):
    """Removes passed pipes and enemies, and passed or collected boosts."""
    state.pipes = [p for p in state.pipes if not p.is_passed]
    state.enemies = [e for e in state.enemies if not e.is_passed]
    state.boosts = [b for b in state.boosts if not (b.is_passed or b.is_collected)]
