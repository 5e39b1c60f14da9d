"""Tests for the TrackDuration value type."""

import dataclasses

import pytest

from xspf_tools.models import TrackDuration


class TestConversions:
    """Test unit conversions."""

    def test_to_seconds(self):
        """Milliseconds convert to fractional seconds."""
        assert TrackDuration(1500).to_seconds() == 1.5

    def test_to_minutes(self):
        """Milliseconds convert to fractional minutes."""
        assert TrackDuration(90000).to_minutes() == 1.5


class TestTimecode:
    """Test "mm:ss" rendering."""

    @pytest.mark.parametrize(
        "ms, expected",
        [
            (0, "00:00"),
            (999, "00:00"),
            (61999, "01:01"),
            (754000, "12:34"),
        ],
    )
    def test_truncates_to_whole_seconds(self, ms, expected):
        """Leftover milliseconds are dropped, not rounded."""
        assert TrackDuration(ms).to_timecode() == expected

    def test_minutes_are_not_wrapped(self):
        """A 100 minute track keeps all of its minutes."""
        assert TrackDuration(100 * 60 * 1000).to_timecode() == "100:00"

    def test_str_is_timecode(self):
        """Printing a duration shows its timecode."""
        assert str(TrackDuration(125000)) == "02:05"


class TestAddition:
    """Test combining durations."""

    def test_add_duration(self):
        """Two durations add up to a new duration."""
        total = TrackDuration(1000) + TrackDuration(2500)
        assert total == TrackDuration(3500)

    def test_add_milliseconds(self):
        """A raw millisecond count can be added on either side."""
        assert TrackDuration(1000) + 500 == TrackDuration(1500)
        assert 500 + TrackDuration(1000) == TrackDuration(1500)

    def test_sum_of_durations(self):
        """The builtin sum works on durations."""
        durations = [TrackDuration(1000), TrackDuration(2000), TrackDuration(3000)]
        assert sum(durations) == TrackDuration(6000)

    def test_addition_does_not_modify_operands(self):
        """Durations are immutable values."""
        first = TrackDuration(1000)
        first + TrackDuration(1000)
        assert first == TrackDuration(1000)

        with pytest.raises(dataclasses.FrozenInstanceError):
            first.ms = 5  # type: ignore[misc]

    def test_add_unsupported_type(self):
        """Adding anything else is a type error."""
        with pytest.raises(TypeError):
            TrackDuration(1000) + "500"  # type: ignore[operator]
