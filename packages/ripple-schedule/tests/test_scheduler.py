"""Tests for EmissionScheduler sessions and absolute-time spawning."""
from __future__ import annotations

from types import SimpleNamespace

import pytest
from ripple import Controls, InvalidParameterError, RenderParams, WaveField

from ripple_schedule import EmissionScheduler, InvalidFrequencyError


@pytest.fixture
def field() -> WaveField:
    return WaveField(1000, 1000)


@pytest.fixture
def controls() -> Controls:
    return Controls(RenderParams(wave_speed=10.0, wave_frequency=2.0))


@pytest.fixture
def fired() -> list:
    return []


@pytest.fixture
def scheduler(field, controls, fired) -> EmissionScheduler:
    return EmissionScheduler(
        field,
        controls,
        time_fn=lambda: 0.0,
        on_spawn=lambda session, wave: fired.append(
            (session.session_id, session.last_fire, wave.origin_x, wave.origin_y)
        ),
    )


class TestStart:
    def test_starts_idle(self, scheduler):
        assert scheduler.state == "idle"
        assert scheduler.active is None
        assert scheduler.pending == 0
        assert scheduler.next_fire() is None

    def test_start_spawns_immediately(self, scheduler, field, fired):
        session = scheduler.start(100, 100, now=0.0)
        assert scheduler.state == "active"
        assert scheduler.active is session
        assert len(field) == 1
        wave = field.waves[0]
        assert (wave.origin_x, wave.origin_y, wave.radius) == (100, 100, 0.0)
        assert fired == [(1, 0.0, 100, 100)]

    def test_start_queues_next_spawn_one_interval_later(self, scheduler):
        session = scheduler.start(0, 0, now=3.0)
        assert session.start_time == 3.0
        assert session.interval == 0.5
        assert scheduler.pending == 1
        assert scheduler.next_fire() == pytest.approx(3.5)

    def test_start_defaults_to_time_source(self, field, controls):
        scheduler = EmissionScheduler(field, controls, time_fn=lambda: 42.0)
        session = scheduler.start(1, 1)
        assert session.start_time == 42.0

    def test_session_ids_increase(self, scheduler):
        first = scheduler.start(0, 0, now=0.0)
        second = scheduler.start(0, 0, now=1.0)
        assert second.session_id > first.session_id


class TestAbsoluteScheduling:
    def test_spawn_k_at_fixed_offset_despite_jitter(self, scheduler, fired):
        scheduler.start(0, 0, now=0.0)
        for t in (0.31, 0.52, 0.99, 1.07, 1.49, 1.58, 2.2):
            scheduler.poll(t)
        assert [f[1] for f in fired] == [0.0, 0.5, 1.0, 1.5, 2.0]
        assert scheduler.next_fire() == pytest.approx(2.5)

    def test_no_cumulative_drift_over_many_cycles(self, field, fired):
        controls = Controls(RenderParams(wave_frequency=3.0))
        scheduler = EmissionScheduler(
            field, controls, on_spawn=lambda s, w: fired.append(s.last_fire)
        )
        scheduler.start(0, 0, now=10.0)
        for k in range(1, 301):
            # Every poll arrives a few milliseconds late.
            scheduler.poll(10.0 + k / 3 + 0.004)
        assert len(fired) == 301
        assert fired[-1] == pytest.approx(110.0)
        assert scheduler.next_fire() == pytest.approx(10.0 + 301 / 3)

    def test_catch_up_emits_every_overdue_spawn(self, scheduler, field):
        scheduler.start(0, 0, now=0.0)
        emitted = scheduler.poll(1.6)
        assert emitted == 3
        assert len(field) == 4

    def test_poll_before_due_is_noop(self, scheduler, field):
        scheduler.start(0, 0, now=0.0)
        assert scheduler.poll(0.49) == 0
        assert len(field) == 1

    def test_poll_when_idle(self, scheduler):
        assert scheduler.poll(100.0) == 0

    def test_spawn_exactly_at_fire_time(self, scheduler, field):
        scheduler.start(0, 0, now=0.0)
        assert scheduler.poll(0.5) == 1

    def test_overdue_spawns_start_at_elapsed_radius(self, scheduler, field):
        scheduler.start(0, 0, now=0.0)
        scheduler.poll(1.6)
        radii = [w.radius for w in field.waves]
        assert radii == pytest.approx([0.0, 11.0, 6.0, 1.0])

    def test_overdue_spawn_past_diagonal_is_not_added(self, controls, fired):
        field = WaveField(30, 40)  # diagonal 50
        scheduler = EmissionScheduler(
            field, controls, on_spawn=lambda s, w: fired.append(w.radius)
        )
        session = scheduler.start(0, 0, now=0.0)
        scheduler.poll(6.0)
        # Spawns due at 0.5 and 1.0 would already be 55 and 50 px wide.
        assert session.spawned == 13
        assert len(field) == 11
        assert all(r < field.diagonal for r in fired)
        assert scheduler.next_fire() == pytest.approx(6.5)


class TestMove:
    def test_move_changes_next_spawn_origin(self, scheduler, field):
        scheduler.start(100, 100, now=0.0)
        scheduler.move(250, 50)
        scheduler.poll(0.5)
        first, second = field.waves
        assert (first.origin_x, first.origin_y) == (100, 100)
        assert (second.origin_x, second.origin_y) == (250, 50)

    def test_move_does_not_spawn_or_reschedule(self, scheduler, field):
        scheduler.start(0, 0, now=0.0)
        before = scheduler.next_fire()
        scheduler.move(5, 5)
        scheduler.move(6, 6)
        assert len(field) == 1
        assert scheduler.next_fire() == before

    def test_move_with_time_settles_due_spawns_first(self, scheduler, field):
        scheduler.start(0, 0, now=0.0)
        scheduler.move(50, 50, now=0.55)
        scheduler.poll(1.0)
        origins = [(w.origin_x, w.origin_y) for w in field.waves]
        assert origins == [(0, 0), (0, 0), (50, 50)]

    def test_move_when_idle_is_ignored(self, scheduler, field):
        scheduler.move(5, 5)
        assert scheduler.active is None
        assert len(field) == 0

    def test_session_owns_origin(self, scheduler):
        session = scheduler.start(1, 2, now=0.0)
        scheduler.move(3, 4)
        assert (session.origin.x, session.origin.y) == (3, 4)


class TestStop:
    def test_stop_prevents_queued_spawn(self, scheduler, field):
        scheduler.start(0, 0, now=0.0)
        scheduler.poll(0.6)
        session = scheduler.stop()
        assert session is not None
        assert scheduler.state == "idle"
        assert scheduler.pending == 0
        assert scheduler.poll(10.0) == 0
        assert len(field) == 2

    def test_stop_with_time_settles_due_spawns(self, scheduler, field, fired):
        scheduler.start(100, 100, now=0.0)
        scheduler.stop(now=1.2)
        assert [f[1] for f in fired] == [0.0, 0.5, 1.0]
        scheduler.poll(50.0)
        assert len(field) == 3

    def test_stop_when_idle(self, scheduler):
        assert scheduler.stop() is None
        assert scheduler.stop(now=1.0) is None

    def test_stop_is_idempotent(self, scheduler, field):
        scheduler.start(0, 0, now=0.0)
        scheduler.stop(now=0.1)
        scheduler.stop(now=0.9)
        assert len(field) == 1

    def test_start_supersedes_active_session(self, scheduler, field, fired):
        first = scheduler.start(10, 10, now=0.0)
        second = scheduler.start(300, 300, now=0.3)
        assert scheduler.active is second
        assert scheduler.pending == 1
        scheduler.poll(0.6)  # first session's 0.5 spawn must not fire
        assert [f[0] for f in fired] == [first.session_id, second.session_id]
        assert scheduler.next_fire() == pytest.approx(0.8)

    def test_listener_restart_drops_stale_catch_up(self, field, controls):
        """Restarting from inside a spawn callback abandons the old schedule."""
        origins = []
        holder = {}

        def on_spawn(session, wave):
            origins.append((session.session_id, wave.origin_x))
            if session.session_id == 1 and session.spawned == 2:
                holder["scheduler"].start(999, 999, now=session.last_fire)

        scheduler = EmissionScheduler(field, controls, on_spawn=on_spawn)
        holder["scheduler"] = scheduler
        scheduler.start(1, 1, now=0.0)
        scheduler.poll(1.6)

        # Session 1 spawned at 0.0 and 0.5; session 2 took over at 0.5 and
        # spawns at 0.5 and 1.0 and 1.5. Nothing else from session 1.
        assert origins == [(1, 1), (1, 1), (2, 999), (2, 999), (2, 999)]

    def test_listener_stop_ends_catch_up(self, field, controls):
        holder = {}

        def on_spawn(session, wave):
            if session.spawned == 2:
                holder["scheduler"].stop()

        scheduler = EmissionScheduler(field, controls, on_spawn=on_spawn)
        holder["scheduler"] = scheduler
        scheduler.start(0, 0, now=0.0)
        assert scheduler.poll(3.0) == 1
        assert scheduler.state == "idle"
        assert len(field) == 2


class TestFrequency:
    def test_change_applies_to_next_decision_only(self, scheduler, controls, fired):
        scheduler.start(0, 0, now=0.0)
        controls.update(wave_frequency=4.0)
        # The spawn queued at 0.5 is not rescheduled.
        assert scheduler.next_fire() == pytest.approx(0.5)
        for t in (0.3, 0.5, 0.8, 1.0, 1.3):
            scheduler.poll(t)
        assert [f[1] for f in fired] == pytest.approx([0.0, 0.5, 0.75, 1.0, 1.25])

    def test_change_reanchors_absolute_schedule(self, scheduler, controls):
        session = scheduler.start(0, 0, now=0.0)
        scheduler.poll(1.0)
        controls.update(wave_frequency=1.0)
        scheduler.poll(1.5)  # spawn at 1.5 was queued under 2 Hz
        assert session.anchor_time == pytest.approx(1.5)
        assert session.anchor_count == 3
        assert scheduler.next_fire() == pytest.approx(2.5)

    def test_non_positive_frequency_rejected(self, field):
        params = SimpleNamespace(wave_frequency=0)
        stub = SimpleNamespace(params=params)
        scheduler = EmissionScheduler(field, stub)
        with pytest.raises(InvalidFrequencyError):
            scheduler.start(0, 0, now=0.0)
        assert len(field) == 0
        assert scheduler.state == "idle"

    def test_invalid_frequency_is_parameter_error(self):
        assert issubclass(InvalidFrequencyError, InvalidParameterError)
        assert issubclass(InvalidFrequencyError, ValueError)

    def test_failed_start_keeps_active_session(self, field):
        params = SimpleNamespace(wave_frequency=2.0, wave_speed=10.0)
        scheduler = EmissionScheduler(field, SimpleNamespace(params=params))
        session = scheduler.start(0, 0, now=0.0)
        params.wave_frequency = -1.0
        with pytest.raises(InvalidFrequencyError):
            scheduler.start(5, 5, now=0.1)
        assert scheduler.active is session
