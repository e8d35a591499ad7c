"""Tests for fit, estimate_tokens and turn_cost."""

import pytest

from sample_chat import InvalidArgumentError, Turn, estimate_tokens, fit, segment, turn_cost


def _turns(costs: list[int]) -> list[Turn]:
    """One turn per cost; content encodes the cost so an oracle can read it back."""
    return [Turn(role="user", name="Sam", content=f"{i}:{c}") for i, c in enumerate(costs)]


def _cost(turn: Turn) -> int:
    return int(turn.content.split(":")[1])


# ---------------------------------------------------------------------------
# fit
# ---------------------------------------------------------------------------

class TestFit:
    def test_no_budget_keeps_everything(self) -> None:
        turns = _turns([5, 500, 5])
        result = fit(turns, None, _cost)
        assert result.additions == turns
        assert result.dropped == 0

    def test_no_budget_never_calls_oracle(self) -> None:
        def boom(turn: Turn) -> int:
            raise AssertionError("oracle called")

        assert fit(_turns([1, 2]), None, boom).dropped == 0

    def test_stops_at_first_turn_over_budget(self) -> None:
        turns = _turns([5, 5, 5, 40, 5, 5])
        result = fit(turns, 25, _cost)
        assert result.additions == turns[-2:]
        assert result.dropped == 4

    def test_does_not_skip_over_expensive_turn(self) -> None:
        # the three older 5-cost turns would fit, but the suffix must be contiguous
        turns = _turns([5, 5, 5, 40, 5])
        result = fit(turns, 25, _cost)
        assert result.additions == turns[-1:]
        assert result.dropped == 4

    def test_exact_budget_is_included(self) -> None:
        turns = _turns([10, 10, 5])
        result = fit(turns, 15, _cost)
        assert result.additions == turns[1:]
        assert result.dropped == 1

    def test_everything_fits(self) -> None:
        turns = _turns([1, 2, 3])
        result = fit(turns, 100, _cost)
        assert result.additions == turns
        assert result.dropped == 0

    def test_newest_turn_too_large(self) -> None:
        turns = _turns([1, 1, 30])
        result = fit(turns, 25, _cost)
        assert result.additions == []
        assert result.dropped == 3

    def test_zero_budget(self) -> None:
        turns = _turns([0, 1, 0])
        result = fit(turns, 0, _cost)
        assert result.additions == turns[-1:]
        assert result.dropped == 2

    def test_empty_turns(self) -> None:
        result = fit([], 10, _cost)
        assert result.additions == []
        assert result.dropped == 0

    def test_negative_budget_rejected(self) -> None:
        calls: list[Turn] = []

        def counting(turn: Turn) -> int:
            calls.append(turn)
            return 1

        with pytest.raises(InvalidArgumentError):
            fit(_turns([1]), -1, counting)
        assert calls == []

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            fit([], -5, _cost)

    def test_oracle_errors_propagate(self) -> None:
        def broken(turn: Turn) -> int:
            raise RuntimeError("tokenizer down")

        with pytest.raises(RuntimeError, match="tokenizer down"):
            fit(_turns([1]), 10, broken)

    def test_input_not_mutated(self) -> None:
        turns = _turns([5, 40, 5])
        snapshot = list(turns)
        fit(turns, 10, _cost)
        assert turns == snapshot


# ---------------------------------------------------------------------------
# Properties over a real transcript
# ---------------------------------------------------------------------------

TRANSCRIPT = """Sam: Hey
Vader: Hi!
<START>
test
Vader: This is how I talk
Sam: Oh, interesting!
Vader: I also talk like this! *smiles* But this is far too long to include in our budget!
Sam: More interesting!"""


class TestFitProperties:
    @pytest.fixture
    def turns(self) -> list[Turn]:
        return segment(TRANSCRIPT, "Vader", "Sam")

    @pytest.mark.parametrize("budget", [0, 3, 10, 25, 40, 1000])
    def test_order_preserved_and_suffix(self, turns: list[Turn], budget: int) -> None:
        cost = turn_cost()
        result = fit(turns, budget, cost)
        assert result.additions == turns[result.dropped:]
        assert result.dropped + len(result.additions) == len(turns)

    @pytest.mark.parametrize("budget", [0, 3, 10, 25, 40, 1000])
    def test_suffix_is_maximal(self, turns: list[Turn], budget: int) -> None:
        cost = turn_cost()
        result = fit(turns, budget, cost)
        assert sum(cost(t) for t in result.additions) <= budget
        if result.dropped:
            longer = turns[result.dropped - 1:]
            assert sum(cost(t) for t in longer) > budget

    @pytest.mark.parametrize("budget", [0, 3, 10, 25, 40, 1000])
    def test_refit_is_idempotent(self, turns: list[Turn], budget: int) -> None:
        cost = turn_cost()
        once = fit(turns, budget, cost)
        twice = fit(once.additions, budget, cost)
        assert twice.additions == once.additions
        assert twice.dropped == 0

    def test_turns_never_truncated(self, turns: list[Turn]) -> None:
        result = fit(turns, 25, turn_cost())
        for turn in result.additions:
            assert turn in turns

    def test_budget_trims_long_turn_and_older(self, turns: list[Turn]) -> None:
        result = fit(turns, 25, turn_cost())
        assert [t.content for t in result.additions] == ["More interesting!"]


# ---------------------------------------------------------------------------
# Token estimation
# ---------------------------------------------------------------------------

class TestEstimateTokens:
    def test_empty_is_zero(self) -> None:
        assert estimate_tokens("") == 0

    def test_rounds_up(self) -> None:
        assert estimate_tokens("a") == 1
        assert estimate_tokens("abcd") == 1
        assert estimate_tokens("abcde") == 2

    def test_custom_ratio(self) -> None:
        assert estimate_tokens("abcdef", chars_per_token=3) == 2

    def test_non_positive_ratio_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            estimate_tokens("abc", chars_per_token=0)
        with pytest.raises(InvalidArgumentError):
            turn_cost(-1)

    def test_turn_cost_uses_content(self) -> None:
        cost = turn_cost(2)
        assert cost(Turn(role="character", name="Vader", content="abcd")) == 2
