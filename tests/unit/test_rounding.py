"""Tests for rounding helpers."""

from seokit.rounding import percentage, round_half_up


class TestRoundHalfUp:
    def test_halves_round_away_from_zero(self) -> None:
        assert round_half_up(62.5) == 63
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(-0.0625, 3) == -0.063

    def test_regular_values(self) -> None:
        assert round_half_up(3.14159, 1) == 3.1
        assert round_half_up(2.66, 1) == 2.7

    def test_zero_stays_positive_zero(self) -> None:
        assert round_half_up(-0.0001, 3) == 0.0


class TestPercentage:
    def test_one_decimal(self) -> None:
        assert percentage(1, 16) == 6.3  # 62.5 rounds up
        assert percentage(2, 3) == 66.7

    def test_two_decimals(self) -> None:
        assert percentage(1, 3, 2) == 33.33

    def test_whole_number(self) -> None:
        assert percentage(3, 4, 0) == 75

    def test_zero_whole(self) -> None:
        assert percentage(5, 0) == 0.0
