"""Tests for the compound duration parser."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from media_resolver.infrastructure.twitch.duration import parse_duration


class TestParseDuration:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("32h47m50s", 118070),
            ("1h20m0s", 4800),
            ("55m31s", 3331),
            ("2m53s", 173),
            ("58s", 58),
        ],
    )
    def test_observed_durations(self, value: str, expected: int) -> None:
        assert parse_duration(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1h", 3600),
            ("1m", 60),
            ("0s", 0),
            ("0h5m", 300),
        ],
    )
    def test_single_and_zero_groups(self, value: str, expected: int) -> None:
        assert parse_duration(value) == expected

    def test_day_unit_is_ignored_but_digits_carry_over(self) -> None:
        # "1" stays pending across the unknown "d" and joins "8" -> 18h
        assert parse_duration("1d8h47m50s") == 67670

    def test_no_recognized_units(self) -> None:
        assert parse_duration("1y10d") == 0

    def test_empty_string(self) -> None:
        assert parse_duration("") == 0

    def test_trailing_digits_are_dropped(self) -> None:
        assert parse_duration("5s30") == 5
        assert parse_duration("42") == 0

    def test_unit_without_digits_contributes_nothing(self) -> None:
        assert parse_duration("h30s") == 30

    def test_unexpected_character_is_logged(self) -> None:
        with capture_logs() as logs:
            assert parse_duration("1y") == 0
        events = [entry["event"] for entry in logs]
        assert "duration_unexpected_character" in events

    def test_missing_number_is_logged(self) -> None:
        with capture_logs() as logs:
            parse_duration("m")
        assert logs[0]["event"] == "duration_missing_number"
        assert logs[0]["log_level"] == "warning"

    def test_oversized_number_contributes_nothing(self) -> None:
        with capture_logs() as logs:
            assert parse_duration("9" * 5000 + "s" + "30s") == 30
        assert logs[0]["event"] == "duration_invalid_number"
        assert logs[0]["length"] == 5000
