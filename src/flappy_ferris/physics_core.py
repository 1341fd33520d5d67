"""
physics_core.py: The deterministic kinematic functions for every entity kind.
"""

from .collaborators import JumpInput
from .constants import (
    BOOST_SPEED, ENEMY_SPEED, FERRIS_HEIGHT, FLOOR_LEVEL, GRAVITY, JUMP, MIDDLE,
    PIPE_SPEED
)
from .data_models import (
    BoostEntity, EnemyEntity, Physics, PipeEntity, PlayerEntity, PlayState
)


class PhysicsCore:
    """
    Shared per-frame kinematics. One semi-implicit Euler step per frame:
    velocity integrates acceleration, then position integrates velocity.
    """

    GRAVITY = GRAVITY
    JUMP = JUMP

    # ---------- Player ----------

    def step_player(self, player: PlayerEntity, jump: JumpInput,
                    state: PlayState) -> PlayState:
        """
        Advances the player one frame and returns the state the game should
        be in afterwards. Accepting a jump from the start or game-over screen
        starts play.
        """
        player.physics.acceleration = self.GRAVITY

        # The jump is re-armed only once the key has been let go.
        if not jump.is_jump_held() and not player.can_jump:
            player.can_jump = True

        new_state = state
        if jump.is_jump_pressed() and player.can_jump:
            player.can_jump = False
            self.jump(player.physics)

            if new_state in (PlayState.START_SCREEN, PlayState.DEAD):
                new_state = PlayState.PLAY

        if new_state is PlayState.START_SCREEN:
            self.auto_jump(player)

        self.move_player(player)
        self.prevent_going_out(player)

        return new_state

    def jump(self, physics: Physics):
        physics.acceleration = self.GRAVITY
        physics.velocity = -self.JUMP

    def auto_jump(self, player: PlayerEntity):
        """Idle bounce used on the start screen."""
        if player.y >= MIDDLE:
            self.jump(player.physics)

    def move_player(self, player: PlayerEntity):
        physics = player.physics
        physics.velocity += physics.acceleration
        player.y += physics.velocity
        player.zone.translate(0.0, physics.velocity)

    def prevent_going_out(self, player: PlayerEntity):
        """Stops the player from flying over the top and skipping the pipes."""
        if player.y < FERRIS_HEIGHT / 2.0:
            player.y = FERRIS_HEIGHT / 2.0
            player.zone.y = 0.0

    def prevent_hitting_ground(self, player: PlayerEntity):
        """Sends the player back to the middle of the screen."""
        player.y = MIDDLE
        player.zone.y = MIDDLE - FERRIS_HEIGHT / 2.0

    def hits_ground(self, player: PlayerEntity) -> bool:
        return player.y > FLOOR_LEVEL

    # ---------- Scrolling entities ----------

    def step_pipe(self, pipe: PipeEntity, multiplier: float):
        dx = -(PIPE_SPEED * multiplier)
        pipe.x += dx
        pipe.top_zone.translate(dx, 0.0)
        pipe.bottom_zone.translate(dx, 0.0)

    def step_enemy(self, enemy: EnemyEntity, multiplier: float):
        dx = -(ENEMY_SPEED * multiplier)
        enemy.x += dx
        enemy.zone.translate(dx, 0.0)

    def step_boost(self, boost: BoostEntity):
        boost.x -= BOOST_SPEED
        boost.zone.translate(-BOOST_SPEED, 0.0)
