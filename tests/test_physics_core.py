import pytest

from flappy_ferris.collaborators import ScriptedInput
from flappy_ferris.constants import (
    BOOST_SPEED, ENEMY_SPEED, FERRIS_HEIGHT, FLOOR_LEVEL, GRAVITY, JUMP, MIDDLE,
    PIPE_SPEED
)
from flappy_ferris.data_models import (
    BoostEntity, BoostType, EnemyEntity, PipeEntity, PlayerEntity, PlayState, Rect
)
from flappy_ferris.physics_core import PhysicsCore


@pytest.fixture
def core():
    return PhysicsCore()


def test_free_fall_matches_closed_form(core):
    player = PlayerEntity()
    y0 = player.y
    no_input = ScriptedInput()

    for n in range(1, 31):
        core.step_player(player, no_input, PlayState.PLAY)
        assert player.physics.velocity == pytest.approx(n * GRAVITY)
        assert player.y == pytest.approx(y0 + GRAVITY * n * (n + 1) / 2)
        assert player.zone.y == pytest.approx(player.y - FERRIS_HEIGHT / 2)


def test_jump_sets_impulse_then_gravity_applies(core):
    player = PlayerEntity()
    core.step_player(player, ScriptedInput(pressed=True, held=True), PlayState.PLAY)

    assert player.physics.velocity == pytest.approx(-JUMP + GRAVITY)
    assert player.y == pytest.approx(MIDDLE - JUMP + GRAVITY)
    assert player.can_jump is False


def test_jump_needs_release_before_next_jump(core):
    player = PlayerEntity()
    held = ScriptedInput(pressed=True, held=True)

    core.step_player(player, held, PlayState.PLAY)
    core.step_player(player, held, PlayState.PLAY)
    # Second frame did not jump again; gravity kept pulling.
    assert player.physics.velocity == pytest.approx(-JUMP + 2 * GRAVITY)

    core.step_player(player, ScriptedInput(), PlayState.PLAY)
    assert player.can_jump is True

    core.step_player(player, held, PlayState.PLAY)
    assert player.physics.velocity == pytest.approx(-JUMP + GRAVITY)


@pytest.mark.parametrize("state", [PlayState.START_SCREEN, PlayState.DEAD])
def test_accepted_jump_starts_play(core, state):
    player = PlayerEntity()
    assert core.step_player(player, ScriptedInput(pressed=True, held=True), state) is PlayState.PLAY


def test_no_jump_keeps_state(core):
    player = PlayerEntity()
    assert core.step_player(player, ScriptedInput(), PlayState.DEAD) is PlayState.DEAD
    assert core.step_player(player, ScriptedInput(), PlayState.PLAY) is PlayState.PLAY


def test_start_screen_bounces_at_midline(core):
    player = PlayerEntity()
    core.step_player(player, ScriptedInput(), PlayState.START_SCREEN)
    assert player.physics.velocity == pytest.approx(-JUMP + GRAVITY)

    for _ in range(500):
        core.step_player(player, ScriptedInput(), PlayState.START_SCREEN)
        assert player.y < MIDDLE + JUMP


def test_top_edge_clamp(core):
    player = PlayerEntity()
    player.y = 5.0
    player.zone.y = 5.0 - FERRIS_HEIGHT / 2

    core.step_player(player, ScriptedInput(), PlayState.PLAY)

    assert player.y == FERRIS_HEIGHT / 2
    assert player.zone.y == 0.0


def test_ground_check_and_midline_snap(core):
    player = PlayerEntity()
    player.y = FLOOR_LEVEL
    assert not core.hits_ground(player)

    player.y = FLOOR_LEVEL + 0.1
    player.zone.y = player.y - FERRIS_HEIGHT / 2
    assert core.hits_ground(player)

    core.prevent_hitting_ground(player)
    assert player.y == MIDDLE
    assert player.zone.y == MIDDLE - FERRIS_HEIGHT / 2


def test_pipes_and_enemies_scroll_with_multiplier(core):
    pipe = PipeEntity.spawn(200.0)
    enemy = EnemyEntity.spawn(300.0)
    pipe_x, top_x, bottom_x, enemy_x = pipe.x, pipe.top_zone.x, pipe.bottom_zone.x, enemy.x

    core.step_pipe(pipe, 1.5)
    core.step_enemy(enemy, 0.5)

    assert pipe.x == pytest.approx(pipe_x - PIPE_SPEED * 1.5)
    assert pipe.top_zone.x == pytest.approx(top_x - PIPE_SPEED * 1.5)
    assert pipe.bottom_zone.x == pytest.approx(bottom_x - PIPE_SPEED * 1.5)
    assert enemy.x == pytest.approx(enemy_x - ENEMY_SPEED * 0.5)
    assert enemy.zone.x == pytest.approx(enemy.x - 64.0)


def test_boosts_ignore_multiplier(core):
    boost = BoostEntity.spawn(300.0, BoostType.SPEED_UP)
    x = boost.x
    core.step_boost(boost)
    assert boost.x == pytest.approx(x - BOOST_SPEED)
    assert boost.zone.x == pytest.approx(boost.x - 32.0)


def test_overlap_is_strict():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    assert not a.overlaps(Rect(10.0, 0.0, 10.0, 10.0))
    assert not a.overlaps(Rect(0.0, 10.0, 10.0, 10.0))
    assert not a.overlaps(Rect(-10.0, -10.0, 10.0, 10.0))
    assert a.overlaps(Rect(9.9, 9.9, 10.0, 10.0))
    assert a.overlaps(Rect(2.0, 2.0, 1.0, 1.0))
