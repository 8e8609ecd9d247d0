"""Tests for timeline materialization."""

from datetime import datetime, timedelta, timezone

from solarcast.timeline import materialize

START = 1705276800  # 2024-01-15 00:00 UTC


class TestMaterialize:
    def test_hourly_length(self) -> None:
        timeline = materialize(START, START + 168 * 3600, 3600)
        assert len(timeline) == 168

    def test_daily_length(self) -> None:
        timeline = materialize(START, START + 7 * 86400, 86400)
        assert len(timeline) == 7

    def test_strictly_increasing_and_evenly_spaced(self) -> None:
        timeline = materialize(START, START + 48 * 3600, 3600)
        gaps = {b - a for a, b in zip(timeline, timeline[1:])}
        assert gaps == {timedelta(hours=1)}

    def test_partial_final_step_included(self) -> None:
        # Steps are taken while start + i * interval < end
        timeline = materialize(START, START + 3600 * 2 + 1, 3600)
        assert len(timeline) == 3

    def test_offset_applied(self) -> None:
        timeline = materialize(START, START + 3600, 3600, utc_offset_seconds=3600)
        assert timeline[0] == datetime(2024, 1, 15, 1, 0, tzinfo=timezone.utc)

    def test_negative_offset_moves_to_previous_day(self) -> None:
        timeline = materialize(START, START + 3600, 3600, utc_offset_seconds=-5 * 3600)
        assert timeline[0].date().isoformat() == "2024-01-14"

    def test_empty_when_end_not_after_start(self) -> None:
        assert materialize(START, START, 3600) == []
        assert materialize(START, START - 3600, 3600) == []

    def test_empty_when_interval_not_positive(self) -> None:
        assert materialize(START, START + 3600, 0) == []
        assert materialize(START, START + 3600, -3600) == []
