import pytest

from conftest import UP, fly, hop
from events import GoalReached, LevelCompleted, Liftoff, NewHighscore, Thruster
from highscore import HighscoreTable
from moonracer import GameStatus, MoonRacer, TickInput, resume_level
from run_context import OFFSCREEN_POS


def of_type(results, kind):
    return [event for result in results for event in result.events if isinstance(event, kind)]


def test_starts_waiting(racer):
    result = racer.tick(TickInput(thrust=UP, restart=True, pause=True))
    assert result.status is GameStatus.WAITING
    assert not result.paused
    assert result.events == []
    assert racer.status_text() == ""


def test_load_level_spawns_on_the_pad(racer):
    racer.load_level(0)
    ctx = racer.ctx
    assert racer.status is GameStatus.SPAWNING
    assert ctx.ship.position == ctx.spawn_pos
    assert ctx.ship.velocity == (0.0, 0.0)
    assert ctx.score == 0
    assert ctx.goal_marker[:2] == ctx.goals[0]
    assert not ctx.pad_armed
    assert ctx.ghost is None


def test_load_level_out_of_range(racer):
    with pytest.raises(IndexError):
        racer.load_level(2)
    with pytest.raises(IndexError):
        racer.load_level(-1)


def test_idle_ticks_are_not_recorded(racer):
    racer.load_level(0)
    for _ in range(30):
        result = racer.tick(TickInput())
    assert result.status is GameStatus.SPAWNING
    assert racer.ctx.frame_count == 0
    assert racer.ctx.thrust_history == []
    assert result.ship_position == racer.ctx.spawn_pos


def test_liftoff(racer):
    racer.load_level(0)
    racer.tick(TickInput())

    result = racer.tick(TickInput(thrust=UP))
    assert result.status is GameStatus.FLYING
    assert result.frame_count == 0
    assert racer.ctx.thrust_history == []
    assert Thruster.FIRING in result.events
    assert Liftoff(level=0) in result.events

    result = racer.tick(TickInput(thrust=UP))
    assert result.frame_count == 1
    assert racer.ctx.thrust_history == [UP]
    assert result.ship_position[1] > racer.ctx.spawn_pos[1]


def test_history_tracks_frame_count(racer):
    racer.load_level(0)
    for thrust in [UP, UP, (0.0, 0.0), (1.0, 1.0), UP]:
        racer.tick(TickInput(thrust=thrust))
        assert len(racer.ctx.thrust_history) == racer.ctx.frame_count


def test_full_run(racer):
    racer.load_level(0)
    results = hop(racer)

    scores = [result.score for result in results]
    assert scores == sorted(scores)
    assert max(scores) == 1

    assert len(of_type(results, GoalReached)) == 1
    assert of_type(results, GoalReached)[0].last
    final = results[-1]
    assert final.status is GameStatus.COMPLETED
    assert final.pad_armed
    assert final.ship_position == OFFSCREEN_POS

    frames = racer.ctx.frame_count
    assert of_type(results, NewHighscore) == [NewHighscore(level=0, frame_count=frames)]
    assert of_type(results, LevelCompleted) == [
        LevelCompleted(level=0, frame_count=frames, made_highscore=False)
    ]
    assert racer.ctx.highscores.best(0) == frames
    assert racer.status_text().startswith("GG! ")


def test_completed_ignores_ticks(racer):
    racer.load_level(0)
    hop(racer)
    frames = racer.ctx.frame_count
    result = racer.tick(TickInput(thrust=UP))
    assert result.status is GameStatus.COMPLETED
    assert result.frame_count == frames


def test_equal_time_is_not_a_record(racer):
    racer.load_level(0)
    hop(racer)
    first_frames = racer.ctx.frame_count

    racer.restart()
    first_ghost = racer.ctx.ghost
    assert first_ghost.frame_count == first_frames
    assert len(first_ghost.positions) == first_frames

    results = hop(racer)
    assert racer.ctx.frame_count == first_frames
    assert of_type(results, NewHighscore) == []
    assert not racer.ctx.made_highscore

    racer.restart()
    assert racer.ctx.ghost is first_ghost


def test_faster_run_replaces_ghost_and_highscore(racer):
    racer.load_level(0)
    hop(racer, wait_ticks=20)
    slow = racer.ctx.frame_count

    racer.restart()
    assert racer.ctx.ghost.frame_count == slow

    results = hop(racer)
    fast = racer.ctx.frame_count
    assert fast < slow
    assert of_type(results, NewHighscore) == [NewHighscore(level=0, frame_count=fast)]
    assert racer.ctx.made_highscore

    # The ghost replay matches the flown trajectory exactly
    flown = [r.ship_position for r in results if r.status is GameStatus.FLYING and r.frame_count]
    racer.restart()
    ghost = racer.ctx.ghost
    assert (ghost.score, ghost.frame_count) == (1, fast)
    assert list(ghost.positions[: len(flown)]) == flown


def test_ghost_follows_an_identical_run(racer):
    racer.load_level(0)
    hop(racer)
    racer.restart()

    for result in hop(racer)[1:-1]:
        assert result.ghost_position == result.ship_position


def test_ghost_parked_when_run_outlasts_it(racer):
    racer.load_level(0)
    hop(racer)
    racer.restart()
    ghost_len = len(racer.ctx.ghost.positions)

    results = hop(racer, wait_ticks=20)
    late = [r for r in results if r.status is GameStatus.FLYING and r.frame_count > ghost_len]
    assert late
    assert all(r.ghost_position == OFFSCREEN_POS for r in late)


def test_previous_highscore_sets_made_highscore(goal_level):
    racer = MoonRacer([goal_level], HighscoreTable({0: 10_000}))
    racer.load_level(0)
    results = hop(racer)
    assert racer.ctx.made_highscore
    assert of_type(results, LevelCompleted)[0].made_highscore


def test_zero_goal_level_completes_on_the_pad(racer):
    racer.load_level(1)
    assert racer.ctx.pad_armed
    assert racer.ctx.goal_marker == OFFSCREEN_POS

    racer.tick(TickInput(thrust=UP))  # liftoff
    result = racer.tick(TickInput(thrust=UP))
    assert result.status is GameStatus.COMPLETED
    assert result.frame_count == 1
    assert of_type([result], NewHighscore) == [NewHighscore(level=1, frame_count=1)]


def test_restart_from_completed(racer):
    racer.load_level(0)
    hop(racer)
    result = racer.tick(TickInput(restart=True))
    assert result.status is GameStatus.SPAWNING
    assert racer.ctx.score == 0
    assert racer.ctx.frame_count == 0
    assert racer.ctx.thrust_history == []
    assert not racer.ctx.made_highscore


def test_restart_mid_flight_stops_thruster(racer):
    racer.load_level(0)
    fly(racer, UP, lambda r: r.frame_count == 5)
    result = racer.tick(TickInput(thrust=UP, restart=True))
    assert result.status is GameStatus.SPAWNING
    assert Thruster.STOPPED in result.events
    # First flight on the level becomes the ghost even without a goal
    ghost = racer.ctx.ghost
    assert (ghost.score, ghost.frame_count, len(ghost.positions)) == (0, 5, 5)


def test_load_level_clears_ghost(racer):
    racer.load_level(0)
    hop(racer)
    racer.restart()
    assert racer.ctx.ghost.score == 1

    racer.load_level(0)
    assert racer.ctx.ghost is None


def test_zero_goal_level_records_a_ghost(racer):
    racer.load_level(1)
    racer.tick(TickInput(thrust=UP))  # liftoff
    racer.tick(TickInput(thrust=UP))
    assert racer.status is GameStatus.COMPLETED

    racer.restart()
    ghost = racer.ctx.ghost
    assert (ghost.score, ghost.frame_count, len(ghost.positions)) == (0, 1, 1)


def test_first_flight_without_goal_becomes_the_ghost(racer):
    racer.load_level(0)
    fly(racer, (1.0, 0.0), lambda r: r.frame_count == 40)
    racer.restart()
    ghost = racer.ctx.ghost
    assert (ghost.score, ghost.frame_count) == (0, 40)

    # A longer run with the same score does not replace it
    fly(racer, (1.0, 0.0), lambda r: r.frame_count == 60)
    racer.restart()
    assert racer.ctx.ghost is ghost


def test_restart_before_liftoff_keeps_the_ghost(racer):
    racer.load_level(0)
    fly(racer, (1.0, 0.0), lambda r: r.frame_count == 40)
    racer.restart()
    ghost = racer.ctx.ghost

    racer.tick(TickInput())
    racer.restart()
    assert racer.ctx.ghost is ghost
    racer.tick(TickInput(restart=True))
    assert racer.ctx.ghost is ghost


def test_pause_freezes_simulation(racer):
    racer.load_level(0)
    fly(racer, UP, lambda r: r.frame_count == 3)
    position = racer.ctx.ship.position

    result = racer.tick(TickInput(thrust=UP, pause=True))
    assert result.paused
    assert Thruster.STOPPED in result.events
    for _ in range(10):
        result = racer.tick(TickInput(thrust=UP))
    assert result.frame_count == 3
    assert racer.ctx.ship.position == position

    result = racer.tick(TickInput(thrust=UP, pause=True))
    assert not result.paused
    assert result.frame_count == 4
    assert Thruster.FIRING in result.events


def test_restart_unpauses(racer):
    racer.load_level(0)
    fly(racer, UP, lambda r: r.frame_count == 3)
    racer.toggle_pause()
    result = racer.tick(TickInput(restart=True))
    assert not result.paused
    assert result.status is GameStatus.SPAWNING


def test_quit_to_menu(racer):
    racer.load_level(0)
    fly(racer, UP, lambda r: r.frame_count == 3)
    racer.quit_to_menu()
    result = racer.tick(TickInput(thrust=UP))
    assert result.status is GameStatus.WAITING
    assert Thruster.STOPPED in result.events


def test_next_level(racer):
    racer.load_level(0)
    assert racer.has_remaining_level
    racer.next_level()
    assert racer.ctx.current_level == 1
    assert not racer.has_remaining_level
    with pytest.raises(IndexError):
        racer.next_level()


def test_status_text(racer):
    racer.load_level(0)
    assert racer.status_text() == "Flying: 0 0.000 sec"
    fly(racer, (1.0, 0.0), lambda r: r.frame_count == 60)
    assert racer.status_text() == "Flying: 0 1.000 sec"


def test_final_text():
    racer = MoonRacer([], HighscoreTable({0: 60, 1: 120}))
    assert racer.final_text() == "GG, you finished moonracer in 3.000!"


@pytest.mark.parametrize("saved, levels, expected", [(0, 4, 0), (2, 4, 2), (4, 4, 3), (9, 4, 3)])
def test_resume_level(saved, levels, expected):
    table = HighscoreTable({i: 100 for i in range(saved)})
    assert resume_level(table, levels) == expected


def test_racer_resumes_after_saved_levels(goal_level, empty_level):
    racer = MoonRacer([goal_level, empty_level], HighscoreTable({0: 100}))
    assert racer.ctx.current_level == 1
