"""Expand series metadata into concrete timestamps."""

from datetime import datetime, timezone


def materialize(
    start_epoch: int,
    end_epoch: int,
    interval_seconds: int,
    utc_offset_seconds: int = 0,
) -> list[datetime]:
    """Build the timeline for a series.

    One timestamp is produced for every ``i`` with
    ``start + i * interval < end``. The UTC offset is added before conversion,
    so the resulting UTC-tagged datetime carries the location's wall clock.

    Args:
        start_epoch: First sample, unix seconds
        end_epoch: Exclusive end, unix seconds
        interval_seconds: Step between samples
        utc_offset_seconds: Offset of the location from UTC

    Returns:
        Ascending, evenly spaced timestamps (empty for degenerate input)
    """
    if interval_seconds <= 0 or end_epoch <= start_epoch:
        return []

    return [
        datetime.fromtimestamp(t + utc_offset_seconds, tz=timezone.utc)
        for t in range(start_epoch, end_epoch, interval_seconds)
    ]
