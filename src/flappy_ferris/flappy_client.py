#!/usr/bin/env python3
"""
flappy_client.py

pygame frontend: keyboard input, mixer audio and primitive-shape rendering
around the GameEngine simulation.
"""

import argparse
import logging
import os
from typing import Dict, Optional, Sequence

import pygame

from .collaborators import AudioSink, SilentAudio, SoundEvent
from .constants import (
    BOOST_HEIGHT, BOOST_WIDTH, DEBUG_MODE, ENEMY_HEIGHT, ENEMY_WIDTH, FERRIS_HEIGHT,
    FERRIS_WIDTH, FLOOR_LEVEL, FPS, PIPE_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
)
from .game_engine import GameEngine
from .rendering import DrawRequest, SpriteKind, TextRequest, build_draw_requests

logger = logging.getLogger(__name__)

SOUND_FILES = {
    SoundEvent.BOOST_COLLECTED: "boost.ogg",
    SoundEvent.DEATH: "death.ogg",
}

LIGHT_BLUE = (77, 193, 203)
GROUND = (222, 216, 149)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

SPRITE_COLORS = {
    SpriteKind.PLAYER_STABLE: (247, 76, 0),
    SpriteKind.PLAYER_JUMPING: (255, 140, 60),
    SpriteKind.PIPE_TOP: (0, 150, 0),
    SpriteKind.PIPE_BOTTOM: (0, 150, 0),
    SpriteKind.ENEMY: (90, 60, 140),
    SpriteKind.BOOST_LIFE: (220, 30, 60),
    SpriteKind.BOOST_SLOW_DOWN: (40, 110, 230),
    SpriteKind.BOOST_SPEED_UP: (250, 200, 0),
}

SPRITE_SIZES = {
    SpriteKind.PLAYER_STABLE: (FERRIS_WIDTH, FERRIS_HEIGHT),
    SpriteKind.PLAYER_JUMPING: (FERRIS_WIDTH, FERRIS_HEIGHT),
    SpriteKind.ENEMY: (ENEMY_WIDTH, ENEMY_HEIGHT),
    SpriteKind.BOOST_LIFE: (BOOST_WIDTH, BOOST_HEIGHT),
    SpriteKind.BOOST_SLOW_DOWN: (BOOST_WIDTH, BOOST_HEIGHT),
    SpriteKind.BOOST_SPEED_UP: (BOOST_WIDTH, BOOST_HEIGHT),
}

LOGO_TEXT = {
    SpriteKind.LOGO_START_SCREEN: "Flappy Ferris - press SPACE",
    SpriteKind.LOGO_GAME_OVER: "Game Over",
}


# ----------------- Input / Audio adapters -----------------

class KeyboardInput:
    """Space bar as the jump signal: a KEYDOWN edge plus the held level."""

    def __init__(self):
        self.pressed = False

    def poll(self, events: Sequence[pygame.event.Event]):
        self.pressed = any(
            event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE
            for event in events)

    def is_jump_pressed(self) -> bool:
        return self.pressed

    def is_jump_held(self) -> bool:
        return bool(pygame.key.get_pressed()[pygame.K_SPACE])


class MixerAudio:
    """Plays the sound effects found in a resources directory."""

    def __init__(self, resources: str):
        self.sounds: Dict[SoundEvent, pygame.mixer.Sound] = {}
        for event, filename in SOUND_FILES.items():
            path = os.path.join(resources, filename)
            try:
                self.sounds[event] = pygame.mixer.Sound(path)
            except (pygame.error, FileNotFoundError) as e:
                logger.error("Could not load sound %s: %s", path, e)
                raise SystemExit(f"Failed to load resource {path}: {e}") from e

    def play(self, event: SoundEvent) -> None:
        self.sounds[event].play()


# ----------------- Game Client (rendering / loop) -----------------

class FlappyClient:
    def __init__(self, seed: Optional[int] = None, fps: int = FPS,
                 debug: bool = DEBUG_MODE, resources: Optional[str] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((int(SCREEN_WIDTH), int(SCREEN_HEIGHT)))
        pygame.display.set_caption("Flappy Ferris")

        self.fps = fps
        self.debug = debug
        self.clock = pygame.time.Clock()
        self.input = KeyboardInput()

        audio: AudioSink = MixerAudio(resources) if resources else SilentAudio()
        self.engine = GameEngine(audio=audio, seed=seed)

        self.fonts: Dict[int, pygame.font.Font] = {}

    def run(self):
        """The main client execution loop."""
        logger.info("Starting game loop at %d FPS", self.fps)
        delta = 0.0
        running = True
        while running:
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    running = False
                if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            self.input.poll(events)
            self.engine.step(delta, self.input)
            self._draw_game()

            # Length of this frame, consumed by the next update.
            delta = self.clock.tick(self.fps) / 1000.0

        logger.info("Quit after %d frames, best score %d",
                    self.engine.frame_count, self.engine.state.best_score)
        pygame.quit()

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            self.fonts[size] = pygame.font.Font(None, size)
        return self.fonts[size]

    def _draw_game(self):
        """Renders the game state using Pygame."""
        for request in build_draw_requests(self.engine.state, self.debug):
            if isinstance(request, TextRequest):
                self._draw_text(request)
            else:
                self._draw_sprite(request)

        pygame.display.flip()

    def _draw_text(self, request: TextRequest):
        surf = self._font(request.size).render(request.text, True, BLACK)
        self.screen.blit(surf, (SCREEN_WIDTH / 2 - surf.get_width() / 2, request.y))

    def _draw_sprite(self, request: DrawRequest):
        screen = self.screen
        sprite = request.sprite
        x, y = request.dest

        if sprite is SpriteKind.BACKGROUND:
            screen.fill(LIGHT_BLUE)
            pygame.draw.rect(screen, GROUND, (0, FLOOR_LEVEL, SCREEN_WIDTH, SCREEN_HEIGHT - FLOOR_LEVEL))
            return

        if sprite in LOGO_TEXT:
            surf = self._font(80).render(LOGO_TEXT[sprite], True, BLACK)
            screen.blit(surf, surf.get_rect(center=(int(x), int(y))))
            return

        if sprite is SpriteKind.PIPE_TOP:
            w, h = PIPE_WIDTH, y
        elif sprite is SpriteKind.PIPE_BOTTOM:
            w, h = PIPE_WIDTH, SCREEN_HEIGHT - y
        else:
            w, h = SPRITE_SIZES[sprite]

        ax, ay = request.anchor
        rect = pygame.Rect(round(x - w * ax), round(y - h * ay), round(w), round(h))
        if sprite in (SpriteKind.PLAYER_STABLE, SpriteKind.PLAYER_JUMPING, SpriteKind.ENEMY):
            pygame.draw.ellipse(screen, SPRITE_COLORS[sprite], rect)
        else:
            pygame.draw.rect(screen, SPRITE_COLORS[sprite], rect)

        if request.outline is not None:
            o = request.outline
            pygame.draw.rect(screen, RED, (round(o.x), round(o.y), round(o.w), round(o.h)), 1)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Flappy Ferris")
    parser.add_argument("--seed", type=int, default=None, help="seed for a replayable run")
    parser.add_argument("--fps", type=int, default=FPS, help="target frame rate")
    parser.add_argument("--debug", action="store_true", default=DEBUG_MODE,
                        help="draw hitbox outlines")
    parser.add_argument("--resources", default=None,
                        help="directory holding boost.ogg and death.ogg")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("Space = Jump | Esc = Quit")
    client = FlappyClient(seed=args.seed, fps=args.fps, debug=args.debug,
                          resources=args.resources)
    client.run()


if __name__ == "__main__":
    main()
