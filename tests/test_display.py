"""Tests for time formatting, progress, snapshots and the info panel."""

import pytest

from freedivecomp.disciplines import DISCIPLINES, DisciplineCode
from freedivecomp.display import (
    PHASE_TITLES, build_snapshot, describe, displayed_seconds, format_time, progress_percent,
)
from freedivecomp.timer.phases import (
    BottomTime, Completed, Idle, OfficialTop, Performance, Phase, SurfaceProtocol,
)


STA = DISCIPLINES[DisciplineCode.STA]
DYN = DISCIPLINES[DisciplineCode.DYN]
CWT = DISCIPLINES[DisciplineCode.CWT]


# ═══════════════════════════════════════════════════════════════════════
#  FORMATTING
# ═══════════════════════════════════════════════════════════════════════


class TestFormatTime:

    @pytest.mark.parametrize("seconds, expected", [
        (0, "00:00"),
        (9, "00:09"),
        (60, "01:00"),
        (125, "02:05"),
        (600, "10:00"),
        (-3, "00:00"),
    ])
    def test_format(self, seconds, expected):
        assert format_time(seconds) == expected


class TestDisplayedSeconds:

    def test_countdowns_show_remaining(self):
        assert displayed_seconds(OfficialTop(17)) == 17
        assert displayed_seconds(SurfaceProtocol(4)) == 4

    def test_performance_shows_elapsed(self):
        assert displayed_seconds(Performance(42)) == 42
        assert displayed_seconds(BottomTime(elapsed=15, remaining=5)) == 15

    def test_terminal_states_show_zero(self):
        assert displayed_seconds(Idle()) == 0
        assert displayed_seconds(Completed()) == 0


class TestProgress:

    def test_performance(self):
        assert progress_percent(Performance(60), STA) == pytest.approx(10.0)

    def test_bottom_time_uses_performance_clock(self):
        assert progress_percent(BottomTime(elapsed=120, remaining=10), CWT) == pytest.approx(50.0)

    def test_surface_protocol(self):
        assert progress_percent(SurfaceProtocol(15), DYN) == pytest.approx(0.0)
        assert progress_percent(SurfaceProtocol(3), DYN) == pytest.approx(80.0)

    def test_clamped_past_max(self):
        assert progress_percent(Performance(900), STA) == 100.0

    @pytest.mark.parametrize("state", [Idle(), OfficialTop(12), Completed()])
    def test_other_phases_zero(self, state):
        assert progress_percent(state, DYN) == 0.0


class TestSnapshot:

    def test_build(self):
        snap = build_snapshot(OfficialTop(7), STA, is_running=True)
        assert snap.phase == Phase.OFFICIAL_TOP
        assert snap.phase_name == "OFFICIAL TOP"
        assert snap.displayed_time == "00:07"
        assert snap.performance_time == "00:00"
        assert snap.shows_progress

    def test_idle_hides_progress(self):
        snap = build_snapshot(Idle(), STA, is_running=False)
        assert snap.phase_name == "READY"
        assert not snap.shows_progress

    def test_every_phase_has_title(self):
        assert set(PHASE_TITLES) == set(Phase)


class TestDescribe:

    def test_static_rows(self):
        assert describe(STA) == [
            ("Official Top", "30s"),
            ("Surface Protocol", "15s"),
            ("Max Performance", "10:00"),
        ]

    def test_dynamic_includes_bottom_time(self):
        assert ("Bottom Time", "10s") in describe(DYN)
