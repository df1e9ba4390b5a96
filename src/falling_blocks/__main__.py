from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from falling_blocks.game import FrameDriver, GameConfig, GameSession, TextDisplay, format_grid


logger = logging.getLogger("falling_blocks")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="falling_blocks")
    p.add_argument("--rows", type=int, default=27)
    p.add_argument("--cols", type=int, default=15)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Open the pygame window (default)")
    play.add_argument("--cell-size", type=int, default=28)
    play.add_argument("--fps", type=int, default=60)

    demo = sub.add_parser("demo", help="Run a headless game with random inputs")
    demo.add_argument("--steps", type=int, default=2000, help="Number of simulated frames")
    demo.add_argument("--frame-ms", type=int, default=16)
    return p


def run_demo(config: GameConfig, steps: int, frame_ms: int) -> GameSession:
    display = TextDisplay(config.rows, config.cols)
    game = GameSession(config, display=display)
    driver = FrameDriver(game)
    inputs = random.Random(config.random_seed)
    now = 0
    driver.start(now)
    for _ in range(steps):
        now += frame_ms
        choice = inputs.randrange(6)
        if choice == 0:
            game.move(-1, 0)
        elif choice == 1:
            game.move(1, 0)
        elif choice == 2:
            game.rotate()
        if not driver.frame(now):
            break
    logger.info("Demo finished after %d frames: score=%d level=%d lines=%d",
                driver.frames, game.progress.score, game.progress.level, game.progress.lines_cleared)
    logger.info("Final board:\n%s", format_grid(game.get_state()))
    print(display.render())
    return game


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = GameConfig(rows=args.rows, cols=args.cols, random_seed=args.seed)

    if args.command == "demo":
        run_demo(config, args.steps, args.frame_ms)
    else:
        from falling_blocks.visualization.human_play import run

        run(config,
            cell_size=getattr(args, "cell_size", 28),
            fps=getattr(args, "fps", 60))


if __name__ == "__main__":  # pragma: no cover
    main()
