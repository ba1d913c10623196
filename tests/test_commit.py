import itertools

from equation_engine.commit import REJECT_PREFIX, commit, reset
from equation_engine.elements import Atom, Fraction
from equation_engine.evaluator import evaluate_state
from equation_engine.grammar import ExpressionState

AB = Fraction("a", "b")


def _ids():
    counter = itertools.count(1)
    return lambda: f"t-{next(counter)}"


def test_blank_commit_is_noop():
    canvas = [AB]
    result = commit(canvas, "   ", ExpressionState.VALID)
    assert result.canvas == [AB]
    assert result.live_input == "   "
    assert result.message is None
    assert not result.committed


def test_invalid_commit_keeps_everything():
    canvas = [AB]
    result = commit(canvas, "ab", evaluate_state(canvas, "ab"))
    assert result.canvas == [AB]
    assert result.live_input == "ab"
    assert result.message == REJECT_PREFIX + "unrecognized token 'ab'"
    assert not result.committed


def test_valid_commit_appends_and_clears():
    canvas = []
    result = commit(canvas, "a/b", ExpressionState.VALID, new_id=_ids())
    assert result.canvas == [AB]
    assert result.canvas[0].id == "t-1"
    assert result.live_input == ""
    assert result.message is None
    assert result.committed
    assert canvas == []


def test_inter_commit_appends():
    result = commit([AB], "+", ExpressionState.INTER)
    assert result.canvas == [AB, Atom("+")]
    assert result.live_input == ""
    assert evaluate_state(result.canvas, "") is ExpressionState.INTER


def test_multi_token_commit_keeps_order():
    result = commit([AB], "+ c/d - x", ExpressionState.VALID, new_id=_ids())
    assert result.canvas == [AB, Atom("+"), Fraction("c", "d"), Atom("-"), Atom("x")]
    assert [el.id for el in result.canvas[1:]] == ["t-1", "t-2", "t-3", "t-4"]


def test_plain_string_state_is_accepted():
    result = commit([AB], "x", "invalid")
    assert not result.committed
    assert result.message.startswith(REJECT_PREFIX)


def test_stale_state_with_unclassifiable_input_is_rejected():
    result = commit([], "a=b", ExpressionState.VALID)
    assert not result.committed
    assert result.live_input == "a=b"


def test_reset():
    result = reset()
    assert result.canvas == []
    assert result.live_input == ""
    assert result.message is None


def test_stale_invalid_state_with_good_input_is_rejected():
    result = commit([], "a/b", ExpressionState.INVALID)
    assert not result.committed
    assert result.canvas == []
    assert result.message == REJECT_PREFIX + "state is invalid"
