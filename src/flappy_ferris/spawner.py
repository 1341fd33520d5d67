"""
spawner.py: Countdown-driven generation of pipes, enemies and boosts.
"""

import logging

from .constants import (
    BOOST_SPAWN_RANGE, BOOST_TYPE_RANGE, BOOST_Y_RANGE, ENEMY_SPAWN_RANGE,
    ENEMY_Y_RANGE, PIPE_SPAWN_RANGE, PIPE_Y_RANGE
)
from .data_models import BoostEntity, BoostType, EnemyEntity, PipeEntity, SessionState

logger = logging.getLogger(__name__)


class Spawner:
    """
    Three independent countdowns, each redrawn from its own range after a
    spawn. All draws come from the session's generator in a fixed order
    (pipe, enemy, boost; position before type) so a seed replays exactly.
    """

    def advance_timers(self, state: SessionState, delta: float):
        """Subtracts the length of the last frame, only while playing."""
        if not state.play_state.is_playing:
            return
        state.time_until_next_pipe -= delta
        state.time_until_next_enemy -= delta
        state.time_until_next_boost -= delta

    def spawn(self, state: SessionState):
        if not state.play_state.is_playing:
            return

        rng = state.rng

        if state.time_until_next_pipe <= 0.0:
            pipe = PipeEntity.spawn(rng.uniform(*PIPE_Y_RANGE))
            state.pipes.append(pipe)
            state.time_until_next_pipe = rng.uniform(*PIPE_SPAWN_RANGE)
            logger.debug("Spawned pipe with gap at y=%.1f", pipe.y)

        if state.time_until_next_enemy <= 0.0:
            enemy = EnemyEntity.spawn(rng.uniform(*ENEMY_Y_RANGE))
            state.enemies.append(enemy)
            state.time_until_next_enemy = rng.uniform(*ENEMY_SPAWN_RANGE)
            logger.debug("Spawned enemy at y=%.1f", enemy.y)

        # Only one boost effect at a time; the countdown keeps running meanwhile.
        if state.time_until_next_boost <= 0.0 and not state.has_boost:
            y = rng.uniform(*BOOST_Y_RANGE)
            effect = BoostType.from_draw(rng.uniform(*BOOST_TYPE_RANGE))
            boost = BoostEntity.spawn(y, effect)
            state.boosts.append(boost)
            state.time_until_next_boost = rng.uniform(*BOOST_SPAWN_RANGE)
            logger.debug("Spawned %s boost at y=%.1f", effect.value, boost.y)
