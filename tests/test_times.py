"""Tests for timestamp helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from fixture_gen.generators import build_time

LAYOUTS = [
    "%a %b %d %H:%M:%S %Y",
    "%d %b %y %H:%M %z",
    "%a, %d %b %Y %H:%M:%S %z",
    "%A, %d-%b-%y %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%d %H:%M:%S",
    "%I:%M%p",
]


class TestBuildTime:
    """Tests for build_time."""

    @pytest.mark.parametrize("layout", LAYOUTS)
    @pytest.mark.parametrize(
        "offset",
        [timedelta(0), timedelta(minutes=-30), timedelta(hours=1)],
    )
    def test_round_trip(self, layout: str, offset: timedelta) -> None:
        """The string parses back to the returned time."""
        text, parsed = build_time(layout, offset)

        assert datetime.strptime(text, layout) == parsed
        assert parsed.strftime(layout) == text

    @pytest.mark.parametrize("offset", [timedelta(0), timedelta(days=-2), timedelta(hours=5)])
    def test_offset_applied(self, offset: timedelta) -> None:
        """The returned time is the current time shifted by the offset."""
        expected = datetime.now(timezone.utc) + offset

        _, parsed = build_time("%Y-%m-%dT%H:%M:%S.%f%z", offset)

        assert abs(parsed - expected) < timedelta(seconds=5)

    def test_precision_follows_layout(self) -> None:
        """Fields missing from the layout are dropped."""
        _, parsed = build_time("%Y-%m-%d")

        assert (parsed.hour, parsed.minute, parsed.second, parsed.microsecond) == (0, 0, 0, 0)

    @pytest.mark.parametrize("offset", [timedelta(days=100), timedelta(days=-100), timedelta(days=183)])
    def test_utc_offset_of_shifted_moment(self, offset: timedelta) -> None:
        """The UTC offset is the one in effect at the shifted moment."""
        expected = (datetime.now() + offset).astimezone().utcoffset()

        _, parsed = build_time("%Y-%m-%dT%H:%M:%S%z", offset)

        assert parsed.utcoffset() == expected
