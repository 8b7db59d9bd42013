# Area: Games Tests
"""Tests for Tug of War."""

import pytest

from conftest import ScriptedActor
from duel_referee.errors import ProtocolViolationError, SideError
from duel_referee.games.tug_of_war import EnergySeat, TugOfWar, parse_energy
from duel_referee.result import Side


class TestParseEnergy:

    @pytest.mark.parametrize("line,expected", [("0", 0), ("7", 7), ("0100", 100)])
    def test_accepts_decimal(self, line, expected):
        assert parse_energy(line) == expected

    @pytest.mark.parametrize("line", ["", "-1", "1.5", "ten", " 3", "0x10"])
    def test_rejects_others(self, line):
        with pytest.raises(ValueError):
            parse_energy(line)


class TestEnergySeat:
    """Tests for per-player energy accounting."""

    def test_pull_decrements_energy(self):
        seat = EnergySeat(ScriptedActor(["30", "70"]), Side.LEFT, 100)
        assert seat.pull() == 30
        assert seat.energy == 70
        assert seat.pull() == 70
        assert seat.energy == 0

    def test_overspend_is_violation(self):
        seat = EnergySeat(ScriptedActor(["11"]), Side.RIGHT, 10)
        with pytest.raises(SideError) as exc_info:
            seat.pull()
        err = exc_info.value
        assert err.side is Side.RIGHT
        assert isinstance(err.cause, ProtocolViolationError)
        assert seat.energy == 10


class TestRound:
    """Tests for whole rounds against in-memory actors."""

    def test_scores(self):
        left = ScriptedActor(["10", "5", "20"])
        right = ScriptedActor(["3", "5", "30"])

        result = TugOfWar(energy=100).round(left, right, 3)

        assert result.scores == (1, 1)

    def test_setup_sends_energy_then_iters(self):
        left = ScriptedActor(["0"])
        right = ScriptedActor(["0"])

        TugOfWar(energy=42).round(left, right, 1)

        assert left.heard[:2] == ["42", "1"]
        assert right.heard[:2] == ["42", "1"]

    def test_players_hear_opponent_spend(self):
        left = ScriptedActor(["10", "20"])
        right = ScriptedActor(["15", "0"])

        TugOfWar(energy=50).round(left, right, 2)

        assert left.heard[2:] == ["15", "0"]
        assert right.heard[2:] == ["10", "20"]

    def test_energy_is_cumulative(self):
        """Spending 60 twice out of 100 fails on the second iteration."""
        left = ScriptedActor(["60", "60"])
        right = ScriptedActor(["0", "0"])

        result = TugOfWar(energy=100).round(left, right, 2)

        assert result.failed_side is Side.LEFT
        assert isinstance(result.error, ProtocolViolationError)
        assert result.scores is None

    def test_right_overspend_blames_right(self):
        left = ScriptedActor(["5"])
        right = ScriptedActor(["101"])

        result = TugOfWar(energy=100).round(left, right, 1)

        assert result.failed_side is Side.RIGHT

    def test_unparsable_spend_blames_sender(self):
        left = ScriptedActor(["lots"])
        right = ScriptedActor(["1"])

        result = TugOfWar().round(left, right, 1)

        assert result.failed_side is Side.LEFT
        assert result.error.line == "lots"
        assert right.asked == 0

    def test_spending_everything_is_allowed(self):
        left = ScriptedActor(["100", "0"])
        right = ScriptedActor(["50", "50"])

        result = TugOfWar(energy=100).round(left, right, 2)

        assert result.scores == (1, 1)

    def test_each_round_starts_with_full_energy(self):
        game = TugOfWar(energy=10)
        for _ in range(2):
            result = game.round(ScriptedActor(["10"]), ScriptedActor(["10"]), 1)
            assert result.scores == (0, 0)

    def test_negative_energy_rejected(self):
        with pytest.raises(ValueError):
            TugOfWar(energy=-1)
