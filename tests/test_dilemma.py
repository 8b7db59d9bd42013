# Area: Games Tests
"""Tests for the iterated Prisoner's Dilemma."""

import itertools

import pytest

from conftest import RepeatingActor, ScriptedActor, TitForTatActor
from duel_referee.errors import ProtocolViolationError
from duel_referee.games.dilemma import Decision, PrisonerDilemma
from duel_referee.result import Side

C = Decision.COOPERATE
D = Decision.DEFECT


class TestPayoff:
    """Tests for the payoff matrix."""

    @pytest.mark.parametrize("both_defect,reward,cooperate", [
        (1, 10, 5),
        (0, 3, 2),
        (-1, 7, 4),
    ])
    def test_matrix(self, both_defect, reward, cooperate):
        game = PrisonerDilemma(both_defect, reward, cooperate)
        assert game.payoff(C, C) == (cooperate, cooperate)
        assert game.payoff(D, D) == (both_defect, both_defect)
        assert game.payoff(C, D) == (0, reward)
        assert game.payoff(D, C) == (reward, 0)

    def test_defaults(self):
        game = PrisonerDilemma()
        assert (game.both_defect, game.betrayal_reward, game.both_cooperate) == (1, 10, 5)


class TestRound:
    """Tests for whole rounds against in-memory actors."""

    def test_two_tit_for_tat_players_draw(self):
        """C/D then D/C: (0,10) + (10,0) = (10,10)."""
        left = TitForTatActor("COOPERATE")
        right = TitForTatActor("DEFECT")

        result = PrisonerDilemma(1, 10, 5).round(left, right, 2)

        assert result.ok, result.error
        assert result.scores == (10, 10)

    def test_always_cooperate_vs_always_defect(self):
        left = RepeatingActor("COOPERATE")
        right = RepeatingActor("DEFECT")

        result = PrisonerDilemma(1, 10, 5).round(left, right, 2)

        assert result.scores == (0, 20)

    def test_total_is_sum_of_iterations(self):
        """Every decision sequence sums exactly to the per-iteration payoffs."""
        game = PrisonerDilemma(1, 10, 5)
        moves = list(itertools.product([C, D], repeat=2))
        left = ScriptedActor([l.value for l, _ in moves])
        right = ScriptedActor([r.value for _, r in moves])

        result = game.round(left, right, len(moves))

        expected = [game.payoff(l, r) for l, r in moves]
        assert result.scores == (sum(e[0] for e in expected),
                                 sum(e[1] for e in expected))

    def test_setup_sends_iteration_count(self):
        left = RepeatingActor("COOPERATE")
        right = RepeatingActor("DEFECT")

        PrisonerDilemma().round(left, right, 3)

        assert left.heard[0] == "3"
        assert right.heard[0] == "3"

    def test_each_player_hears_only_the_opponent(self):
        left = ScriptedActor(["COOPERATE", "DEFECT"])
        right = ScriptedActor(["DEFECT", "DEFECT"])

        PrisonerDilemma().round(left, right, 2)

        assert left.heard == ["2", "DEFECT", "DEFECT"]
        assert right.heard == ["2", "COOPERATE", "DEFECT"]

    def test_invalid_decision_blames_left(self):
        left = TitForTatActor("Sth")
        right = TitForTatActor("DEFECT")

        result = PrisonerDilemma(1, 10, 5).round(left, right, 2)

        assert not result.ok
        assert result.failed_side is Side.LEFT
        assert isinstance(result.error, ProtocolViolationError)
        assert result.error.line == "Sth"

    def test_invalid_decision_blames_right(self):
        left = ScriptedActor(["COOPERATE"])
        right = ScriptedActor(["cooperate"])

        result = PrisonerDilemma().round(left, right, 1)

        assert result.failed_side is Side.RIGHT
        assert isinstance(result.error, ProtocolViolationError)
        # The well-behaved side was never told anything about the round.
        assert left.heard == ["1"]

    def test_zero_iterations(self):
        left = ScriptedActor([])
        right = ScriptedActor([])

        result = PrisonerDilemma().round(left, right, 0)

        assert result.scores == (0, 0)
        assert left.asked == 0 and right.asked == 0

    def test_game_is_reusable(self):
        game = PrisonerDilemma()
        first = game.round(RepeatingActor("DEFECT"), RepeatingActor("DEFECT"), 4)
        second = game.round(RepeatingActor("DEFECT"), RepeatingActor("DEFECT"), 4)
        assert first.scores == second.scores == (4, 4)
