from flappy_ferris.constants import PIPE_GAP
from flappy_ferris.data_models import (
    BoostEntity, BoostType, EnemyEntity, PipeEntity, PlayState, SessionState
)
from flappy_ferris.rendering import (
    DrawRequest, SpriteKind, TextRequest, build_draw_requests
)


def sprites(requests):
    return [r.sprite for r in requests if isinstance(r, DrawRequest)]


def texts(requests):
    return [r.text for r in requests if isinstance(r, TextRequest)]


def test_start_screen_shows_logo_and_player():
    requests = build_draw_requests(SessionState())

    assert sprites(requests) == [
        SpriteKind.BACKGROUND, SpriteKind.LOGO_START_SCREEN, SpriteKind.PLAYER_STABLE]
    assert texts(requests) == []


def test_game_over_shows_best_score():
    state = SessionState(play_state=PlayState.DEAD, best_score=12)
    requests = build_draw_requests(state)

    assert SpriteKind.LOGO_GAME_OVER in sprites(requests)
    assert texts(requests) == ["Best score: 12"]


def test_play_draws_every_entity_and_stats():
    state = SessionState(play_state=PlayState.PLAY, lives=2, score=3)
    state.player.physics.velocity = -4.0
    state.pipes.append(PipeEntity.spawn(200.0))
    state.enemies.append(EnemyEntity.spawn(300.0))
    state.boosts.append(BoostEntity.spawn(400.0, BoostType.SLOW_DOWN))

    requests = build_draw_requests(state)

    assert sprites(requests) == [
        SpriteKind.BACKGROUND, SpriteKind.PLAYER_JUMPING, SpriteKind.PIPE_TOP,
        SpriteKind.PIPE_BOTTOM, SpriteKind.ENEMY, SpriteKind.BOOST_SLOW_DOWN]
    assert texts(requests) == ["Lives available: 2", "3"]

    bottom = next(r for r in requests if getattr(r, "sprite", None) is SpriteKind.PIPE_BOTTOM)
    assert bottom.dest[1] == 200.0 + PIPE_GAP
    assert bottom.anchor == (0.5, 0.0)
    assert all(r.outline is None for r in requests if isinstance(r, DrawRequest))


def test_debug_adds_hitbox_outlines():
    state = SessionState(play_state=PlayState.PLAY)
    enemy = EnemyEntity.spawn(300.0)
    state.enemies.append(enemy)

    requests = build_draw_requests(state, debug=True)
    enemy_request = next(r for r in requests if getattr(r, "sprite", None) is SpriteKind.ENEMY)

    assert enemy_request.outline == enemy.zone
    assert enemy_request.outline is not enemy.zone
