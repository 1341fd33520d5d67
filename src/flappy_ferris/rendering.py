"""
rendering.py: Projects the session state onto a flat list of draw requests.
Nothing here touches a window; the client turns requests into pixels.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from .constants import PIPE_GAP, SCREEN_HEIGHT, SCREEN_WIDTH
from .data_models import BoostType, PlayState, Rect, SessionState


class SpriteKind(Enum):
    BACKGROUND = "background"
    LOGO_START_SCREEN = "logo_start_screen"
    LOGO_GAME_OVER = "logo_game_over"
    PLAYER_STABLE = "ferris_stable"
    PLAYER_JUMPING = "ferris_jumping"
    PIPE_TOP = "pipe_top"
    PIPE_BOTTOM = "pipe_bottom"
    ENEMY = "enemy"
    BOOST_LIFE = "boost_life"
    BOOST_SLOW_DOWN = "boost_slow_down"
    BOOST_SPEED_UP = "boost_speed_up"


BOOST_SPRITES = {
    BoostType.BONUS_LIFE: SpriteKind.BOOST_LIFE,
    BoostType.SLOW_DOWN: SpriteKind.BOOST_SLOW_DOWN,
    BoostType.SPEED_UP: SpriteKind.BOOST_SPEED_UP,
}


@dataclass(frozen=True)
class DrawRequest:
    """
    A sprite to paint. `dest` is the point the sprite is anchored to and
    `anchor` says which point of the sprite that is, as a fraction of its
    size ((0.5, 0.5) is the centre).
    """
    sprite: SpriteKind
    dest: Tuple[float, float]
    anchor: Tuple[float, float] = (0.5, 0.5)
    outline: Optional[Rect] = None


@dataclass(frozen=True)
class TextRequest:
    """Text centred horizontally at the given height."""
    text: str
    y: float
    size: int


Request = Union[DrawRequest, TextRequest]


def build_draw_requests(state: SessionState, debug: bool = False) -> List[Request]:
    """Returns everything to paint this frame, back to front."""
    requests: List[Request] = [DrawRequest(SpriteKind.BACKGROUND, (0.0, 0.0), anchor=(0.0, 0.0))]

    def outline(zone: Rect) -> Optional[Rect]:
        return Rect(zone.x, zone.y, zone.w, zone.h) if debug else None

    logo_pos = (SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 4.0)
    if state.play_state is PlayState.START_SCREEN:
        requests.append(DrawRequest(SpriteKind.LOGO_START_SCREEN, logo_pos))
    elif state.play_state is PlayState.DEAD:
        requests.append(DrawRequest(SpriteKind.LOGO_GAME_OVER, logo_pos))
        requests.append(TextRequest(f"Best score: {state.best_score}", SCREEN_HEIGHT / 2.0, 50))

    player = state.player
    sprite = (SpriteKind.PLAYER_STABLE if player.physics.velocity >= 0.0
              else SpriteKind.PLAYER_JUMPING)
    requests.append(DrawRequest(sprite, (player.x, player.y), outline=outline(player.zone)))

    for pipe in state.pipes:
        requests.append(DrawRequest(SpriteKind.PIPE_TOP, (pipe.x, pipe.y), anchor=(0.5, 1.0),
                                    outline=outline(pipe.top_zone)))
        requests.append(DrawRequest(SpriteKind.PIPE_BOTTOM, (pipe.x, pipe.y + PIPE_GAP),
                                    anchor=(0.5, 0.0), outline=outline(pipe.bottom_zone)))

    for enemy in state.enemies:
        requests.append(DrawRequest(SpriteKind.ENEMY, (enemy.x, enemy.y),
                                    outline=outline(enemy.zone)))

    for boost in state.boosts:
        requests.append(DrawRequest(BOOST_SPRITES[boost.effect], (boost.x, boost.y),
                                    outline=outline(boost.zone)))

    if state.play_state.is_playing:
        requests.append(TextRequest(f"Lives available: {state.lives}", SCREEN_HEIGHT / 8.0, 30))
        requests.append(TextRequest(f"{state.score}", SCREEN_HEIGHT / 6.0, 100))

    return requests
