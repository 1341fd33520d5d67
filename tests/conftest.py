import pytest

from flappy_ferris.collaborators import ScriptedInput
from flappy_ferris.data_models import PlayState
from flappy_ferris.game_engine import GameEngine

FRAME = 1.0 / 60.0


class RecordingAudio:
    def __init__(self):
        self.events = []

    def play(self, event):
        self.events.append(event)


def move_onto_player(player, *zones):
    """Shifts entity zones horizontally so they line up with the player's zone."""
    dx = player.zone.x - zones[0].x
    for zone in zones:
        zone.translate(dx, 0.0)
    return dx


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def jump():
    return ScriptedInput()


@pytest.fixture
def engine(audio):
    return GameEngine(audio=audio, seed=1234)


@pytest.fixture
def playing(engine):
    engine.state.play_state = PlayState.PLAY
    return engine
