from __future__ import annotations

import logging

from falling_blocks.__main__ import build_parser, main, run_demo
from falling_blocks.game import GameConfig


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert (args.rows, args.cols) == (27, 15)
    assert args.command is None


def test_demo_runs_headless(capsys):
    main(["--seed", "4", "demo", "--steps", "400"])
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0].startswith("Score: ")
    assert len(lines) == 28
    assert all(len(line) == 15 for line in lines[1:])


def test_demo_reaches_game_over_on_small_board():
    game = run_demo(GameConfig(rows=8, cols=6, random_seed=1), steps=20000, frame_ms=100)
    assert game.game_over


def test_demo_logs_final_board(caplog):
    with caplog.at_level(logging.INFO, logger="falling_blocks"):
        run_demo(GameConfig(rows=6, cols=5, random_seed=2), steps=50, frame_ms=16)
    board = caplog.text.split("Final board:\n", 1)[1].splitlines()[:6]
    assert all(len(line) == 5 for line in board)
    assert any("▓" in line for line in board)
