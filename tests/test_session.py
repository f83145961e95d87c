import math

import numpy as np
import pytest

from neon_glide.core.frame_loop import FrameScheduler
from neon_glide.game.entities import Obstacle, Particle
from neon_glide.game.input import ReleaseDrag, SetTarget, StartRun
from neon_glide.game.persistence import JsonBestScoreStore, MemoryBestScoreStore
from neon_glide.game.session import FlashSignal, GamePhase, GameSession


def exact_obstacle(session, id=999):
    x, y, w, h = session.player.rect()
    return Obstacle(id=id, x=x, y=y, width=w, height=h, speed=100.0)


def overlapping_obstacle(session, id=998):
    """A still, full-width band across the player's row; hits wherever the player is."""
    return Obstacle(
        id=id, x=0.0, y=session.player.y, width=360.0, height=session.player.height, speed=0.0
    )


def assert_initial_run_state(session):
    assert session.player.x == 156.0
    assert session.player.y == 556.0
    assert session.player.vx == 0.0
    assert session.target_x == 180.0
    assert session.score == 0
    assert session.obstacles == []
    assert len(session.particles) == 0
    assert session.difficulty.spawn_interval == 1400.0
    assert session.difficulty.base_speed == 120.0
    assert session.difficulty.last_spawn == 0.0
    assert session.clock_ms == 0.0
    assert session.last_time is None


def test_starts_idle(session):
    assert session.phase is GamePhase.IDLE
    assert session.best_score == 0
    assert_initial_run_state(session)


def test_tick_does_nothing_while_idle(session):
    session.obstacles.append(overlapping_obstacle(session))
    session.tick(0.0)
    session.tick(5000.0)
    assert session.phase is GamePhase.IDLE
    assert len(session.particles) == 0


def test_start_enters_running_and_flashes(session):
    session.start()
    assert session.phase is GamePhase.RUNNING
    assert session.flash.active
    assert session.flash.remaining_ms == 120.0


def test_start_is_ignored_while_running(session):
    session.start()
    session.tick(0.0)
    session.tick(50.0)
    score = session.score
    session.start()
    assert session.score == score
    assert session.last_time == 50.0


def test_ten_frames_without_drift():
    session = GameSession(rng=np.random.default_rng(0))
    session.start()
    x0 = session.player.x
    expected = 0
    session.tick(0.0)  # first frame only sets the clock
    for i in range(1, 11):
        expected += math.floor(session.difficulty.base_speed * 0.016 / 2)
        session.tick(i * 16.0)
    assert session.player.x == x0
    assert session.score == expected
    assert session.obstacles == []
    assert session.clock_ms == pytest.approx(160.0)


def test_score_accumulates_by_speed_and_delta(session):
    session.start()
    session.tick(0.0)
    for i in range(1, 6):
        session.tick(i * 50.0)
    # floor(120 * 0.05 / 2) == 3 per frame
    assert session.score == 15


def test_overlap_ends_run_with_impact_burst(session, store):
    session.start()
    session.obstacles.append(exact_obstacle(session))
    before = len(session.particles)
    session.tick(0.0)
    assert session.phase is GamePhase.ENDED
    assert len(session.particles) == before + 12
    assert session.flash.remaining_ms == 160.0


def test_impact_burst_is_trimmed_to_cap(session):
    session.start()
    session.particles.extend(
        Particle(x=10, y=10, radius=2, vx=0, vy=0, hue=200) for _ in range(35)
    )
    session.obstacles.append(overlapping_obstacle(session))
    session.tick(0.0)
    assert session.phase is GamePhase.ENDED
    assert len(session.particles) == 40


def test_crash_frame_scores_nothing(session):
    session.start()
    session.tick(0.0)
    session.tick(50.0)
    assert session.score == 3
    session.obstacles.append(overlapping_obstacle(session))
    session.tick(100.0)
    assert session.phase is GamePhase.ENDED
    assert session.score == 3


def test_score_frozen_after_end(session):
    session.start()
    session.tick(0.0)
    session.tick(100.0)
    session.obstacles.append(overlapping_obstacle(session))
    session.tick(150.0)
    frozen = session.score
    player_x = session.player.x
    for t in (200.0, 400.0, 10_000.0):
        session.tick(t)
        assert session.score == frozen
        assert session.player.x == player_x
        assert session.phase is GamePhase.ENDED


def test_score_monotonic_while_running():
    session = GameSession(rng=np.random.default_rng(5))
    session.start()
    session.submit(SetTarget(40.0))
    last = 0
    t = 0.0
    for _ in range(2000):
        session.tick(t)
        t += 16.0
        if not session.running:
            break
        assert session.score >= last
        last = session.score


def test_best_score_updated_and_persisted(store):
    session = GameSession(store, rng=np.random.default_rng(1))
    session.start()
    session.score = 50
    session.obstacles.append(overlapping_obstacle(session))
    session.tick(0.0)
    assert session.best_score == 50
    assert store.get_best_score() == 50


def test_best_score_never_decreases():
    store = MemoryBestScoreStore(100)
    session = GameSession(store, rng=np.random.default_rng(1))
    assert session.best_score == 100
    session.start()
    session.score = 50
    session.obstacles.append(overlapping_obstacle(session))
    session.tick(0.0)
    assert session.best_score == 100
    assert store.get_best_score() == 100


@pytest.mark.parametrize("previous,final", [(0, 0), (0, 7), (10, 3), (10, 10), (10, 11)])
def test_best_is_max_of_previous_and_final(previous, final):
    session = GameSession(MemoryBestScoreStore(previous), rng=np.random.default_rng(2))
    session.start()
    session.score = final
    session.obstacles.append(overlapping_obstacle(session))
    session.tick(0.0)
    assert session.best_score == max(previous, final)


def test_invalid_stored_best_reads_as_zero(tmp_path):
    path = tmp_path / "save.json"
    path.write_text('{"neon-glide-best": "lots"}', encoding="utf-8")
    session = GameSession(JsonBestScoreStore(str(path)), rng=np.random.default_rng(3))
    assert session.best_score == 0


def test_restart_after_end_restores_initial_state(session):
    session.start()
    session.submit(SetTarget(300.0))
    session.tick(0.0)
    for i in range(1, 120):
        session.tick(i * 16.0)
        if not session.running:
            break
    if session.running:
        session.obstacles.append(overlapping_obstacle(session))
        session.tick(5000.0)
    assert session.phase is GamePhase.ENDED
    best = session.best_score

    session.submit(StartRun())
    assert session.phase is GamePhase.RUNNING
    assert_initial_run_state(session)
    assert session.best_score == best


def test_steering_intents_apply_on_next_tick(session):
    session.start()
    session.submit(SetTarget(300.0))
    assert session.target_x == 180.0
    session.tick(0.0)
    assert session.target_x == 300.0
    session.tick(100.0)
    assert session.player.vx > 0
    session.submit(ReleaseDrag())
    session.tick(100.0)
    # velocity was zeroed, then the zero-delta frame added nothing
    assert session.player.vx == pytest.approx(0.0)


def test_start_drops_stale_intents(session):
    session.submit(SetTarget(10.0))
    session.start()
    session.tick(0.0)
    assert session.target_x == 180.0


def test_obstacles_leave_past_bottom_margin(session):
    session.start()
    session.player.x = 12.0
    session.target_x = 12.0 + 24.0
    far = Obstacle(id=1, x=300.0, y=679.0, width=60.0, height=12.0, speed=100.0)
    near = Obstacle(id=2, x=300.0, y=600.0, width=60.0, height=12.0, speed=100.0)
    session.obstacles.extend([far, near])
    session.tick(0.0)
    session.tick(16.0)
    assert session.obstacles == [near]


def test_scheduled_frames_stop_after_crash(scheduled_session):
    s = scheduled_session
    sched = s.scheduler
    assert not sched.pending
    s.start()
    assert sched.pending
    assert sched.run_pending(0.0)
    assert sched.pending  # rescheduled while running
    s.obstacles.append(overlapping_obstacle(s))
    sched.run_pending(16.0)
    assert s.phase is GamePhase.ENDED
    assert not sched.pending


def test_stop_revokes_pending_frame(scheduled_session):
    s = scheduled_session
    s.start()
    s.stop()
    assert not s.scheduler.run_pending(0.0)
    assert s.last_time is None


def test_without_scheduler_nothing_is_scheduled(session):
    session.start()
    assert session.scheduler is None
    session.stop()


def test_sessions_are_independent(rng):
    a = GameSession(rng=np.random.default_rng(1))
    b = GameSession(rng=np.random.default_rng(1))
    a.start()
    a.tick(0.0)
    a.tick(100.0)
    assert a.score > 0
    assert b.score == 0
    assert b.phase is GamePhase.IDLE


def test_flash_signal_decays():
    f = FlashSignal()
    assert not f.active
    f.trigger(120.0)
    f.advance(0.1)
    assert f.remaining_ms == pytest.approx(20.0)
    f.advance(0.1)
    assert not f.active
    assert f.remaining_ms == 0.0


def test_scheduler_cancel_with_stale_handle_keeps_new_request():
    sched = FrameScheduler()
    calls = []
    old = sched.request(lambda t: calls.append(("old", t)))
    sched.request(lambda t: calls.append(("new", t)))
    sched.cancel(old)
    assert sched.run_pending(5.0)
    assert calls == [("new", 5.0)]
    assert not sched.run_pending(6.0)
