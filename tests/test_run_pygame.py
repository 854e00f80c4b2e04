import random
import types

import pygame

from colorfall.game_loop import GameLoop, Phase
from colorfall.run_pygame import PALETTE, caption, handle_key
from colorfall.scheduler import ManualScheduler


def _key(key):
    return types.SimpleNamespace(key=key)


def test_palette_covers_every_colour():
    assert len(PALETTE) == 7


def test_keys_drive_game_commands():
    game = GameLoop(ManualScheduler(), rng=random.Random(0))
    assert handle_key(_key(pygame.K_RETURN), game)
    x0 = game.state.active.x
    assert handle_key(_key(pygame.K_LEFT), game)
    assert game.state.active.x == x0 - 1
    assert handle_key(_key(pygame.K_DOWN), game)
    assert game.state.score == 1
    assert handle_key(_key(pygame.K_p), game)
    assert game.phase is Phase.PAUSED
    assert caption(game).startswith("Colorfall - Paused")
    assert not handle_key(_key(pygame.K_RIGHT), game)
    assert handle_key(_key(pygame.K_r), game)
    assert game.phase is Phase.RUNNING
    assert not handle_key(_key(pygame.K_a), game)
