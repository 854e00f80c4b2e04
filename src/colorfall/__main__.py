"""Simple ASCII demo for the engine.

Run with: `python -m colorfall`

Starts a game on a manual clock, lets a few ticks pass and prints the board
with the falling piece overlaid.  Useful as a minimal smoke test that the
engine runs without a display.
"""

from __future__ import annotations

from . import GameLoop, ManualScheduler, render_grid


def _print_grid(grid: list[list[int]]) -> None:
    for row in grid:
        print("".join(str(cell) if cell else "." for cell in row))


def main() -> None:
    scheduler = ManualScheduler()
    game = GameLoop(scheduler)
    game.start()
    scheduler.advance(3 * game.state.fall_interval_ms)
    _print_grid(render_grid(game.state.board, game.state.active))
    print(f"score={game.state.score} level={game.state.level} phase={game.phase.value}")


if __name__ == "__main__":
    main()
