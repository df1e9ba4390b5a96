from __future__ import annotations

from falling_blocks.game import SHAPES, ActivePiece, FrameDriver, ShapeKind


def test_frames_feed_elapsed_time(session):
    driver = FrameDriver(session)
    driver.start(1000)
    assert driver.scheduled
    assert driver.frame(1400)
    assert session.drop_counter == 400
    assert driver.frame(2000)
    assert session.drop_counter == 1000
    assert session.active.y == 0
    assert driver.frame(2001)
    assert session.active.y == 1
    assert driver.frames == 3


def test_frame_without_start_is_ignored(session):
    driver = FrameDriver(session)
    assert not driver.frame(100)
    assert session.drop_counter == 0


def test_game_over_stops_scheduling(session):
    for y in (0, 1):
        for x in range(14):
            session.grid.set_cell(x, y, 1)
    session.active = ActivePiece(shape=SHAPES[ShapeKind.SQUARE], x=0, y=25, color=2)

    driver = FrameDriver(session)
    driver.start(0)
    assert driver.frame(1001)
    assert session.game_over
    assert not driver.scheduled
    assert not driver.frame(2000)


def test_restart_invalidates_pending_frame(session):
    driver = FrameDriver(session)
    stale = driver.start(0)
    driver.frame(300)
    session.move(1, 0)

    fresh = driver.restart(5000)
    assert fresh != stale
    assert not driver.frame(5100, stale)
    assert session.running
    assert session.progress.score == 0

    # first frame after a restart measures from the restart time
    assert driver.frame(5000, fresh)
    assert session.drop_counter == 0
    assert driver.frames == 1


def test_restart_after_game_over_resumes_loop(session, display):
    session.active = ActivePiece(shape=SHAPES[ShapeKind.SQUARE], x=0, y=-1, color=2)
    session.lock()
    driver = FrameDriver(session)
    driver.start(0)
    driver.frame(16)
    assert not driver.scheduled

    driver.restart(100)
    assert driver.scheduled
    assert not display.game_over_visible
    assert driver.frame(116)
    assert driver.scheduled
