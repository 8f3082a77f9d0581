import logging

import pytest

from enumerable import (
    Break,
    Continue,
    Failure,
    Frame,
    FunctionRef,
    Lambda,
    NonLocalReturn,
    Normal,
    define_function,
    invoke,
    is_signal,
    settle,
)
from enumerable.combinators.base import open_frame, propagate
from enumerable.errors import ArityError, EnumerableTypeError, InvalidArgument, UnknownFunction
from enumerable.types.callable_fn import as_block


def test_function_ref_runs_registered_function(frame):
    define_function("add_pair", lambda a, b: a + b)
    assert invoke(FunctionRef("add_pair"), [2, 3], 0, frame) == Normal(5)


def test_lambda_receives_arguments(frame):
    block = Lambda(["a", "b"], lambda f: f["a"] * f["b"])
    assert invoke(block, [4, 5], 0, frame) == Normal(20)


def test_lambda_rest_parameter_collects_surplus(frame):
    block = Lambda(["head"], lambda f: (f["head"], f["tail"]), rest="tail")
    assert invoke(block, [1, 2, 3], 0, frame) == Normal((1, [2, 3]))
    assert invoke(block, [1], 0, frame) == Normal((1, []))


def test_too_few_arguments_fails_without_running_body(frame, calls):
    block = Lambda(["a", "b"], lambda f: calls.append(1))
    signal = invoke(block, [1], 0, frame)
    assert isinstance(signal, Failure)
    assert isinstance(signal.error, ArityError)
    assert "missing 1 parameter" in str(signal.error)
    assert calls == []


def test_too_many_arguments_fails(frame):
    signal = invoke(Lambda(["a"], lambda f: f["a"]), [1, 2], 0, frame)
    assert isinstance(signal, Failure)
    assert isinstance(signal.error, ArityError)


def test_function_ref_arity_mismatch_fails(frame, calls):
    define_function("one_arg", lambda a: calls.append(a))
    signal = invoke(FunctionRef("one_arg"), [1, 2], 0, frame)
    assert isinstance(signal, Failure)
    assert isinstance(signal.error, ArityError)
    assert calls == []


def test_unknown_function_fails(frame):
    signal = invoke(FunctionRef("no_such_function"), [], 0, frame)
    assert isinstance(signal, Failure)
    assert isinstance(signal.error, UnknownFunction)


def test_non_block_fails(frame):
    signal = invoke(42, [], 0, frame)
    assert isinstance(signal, Failure)
    assert isinstance(signal.error, EnumerableTypeError)


def test_depth_beyond_frame_chain_fails(frame):
    signal = invoke(Lambda([], lambda f: 1), [], 3, frame)
    assert isinstance(signal, Failure)
    assert isinstance(signal.error, InvalidArgument)


def test_body_exception_becomes_failure_with_same_error(frame):
    error = ValueError("bad item")

    def body(f):
        raise error

    signal = invoke(Lambda([], body), [], 0, frame)
    assert signal == Failure(error)
    assert signal.error is error


def test_failure_is_logged_at_debug(frame, caplog):
    caplog.set_level(logging.DEBUG, logger="enumerable")

    def body(f):
        raise KeyError("k")

    invoke(Lambda([], body), [], 0, frame)
    assert "failed" in caplog.text


@pytest.mark.parametrize(
    "outcome, expected",
    [
        (7, Normal(7)),
        (None, Normal(None)),
        (Break(1), Break(1)),
        (Continue(2), Continue(2)),
        (NonLocalReturn(0, "v"), NonLocalReturn(0, "v")),
        (NonLocalReturn(1, "v"), NonLocalReturn(0, "v")),
        (NonLocalReturn(3, "v"), NonLocalReturn(2, "v")),
    ],
)
def test_outcome_classification(frame, outcome, expected):
    assert invoke(Lambda([], lambda f: outcome), [], 0, frame) == expected


def test_block_frame_hangs_off_target(frame):
    seen = []
    own = Frame(parent=frame, name="combinator")
    block = Lambda([], lambda f: seen.append(f.parent))
    invoke(block, [], 0, own)
    invoke(block, [], 1, own)
    assert seen == [own, frame]


def test_block_locals_do_not_leak(frame):
    def body(f):
        f.define("scratch", 1)
        return f["scratch"]

    assert invoke(Lambda([], body), [], 0, frame) == Normal(1)
    assert "scratch" not in frame


def test_alias_at_depth_zero_writes_invoking_frame():
    scope = Frame(bindings={"test": [1, 2, 3]})
    block = Lambda([], lambda f: f.set("test", []), aliases=["test"])
    assert invoke(block, [], 0, scope) == Normal(None)
    assert scope["test"] == []


def test_alias_at_depth_one_writes_callers_frame():
    def accepts_block(block, caller):
        own = Frame(parent=caller, name="accepts_block")
        return invoke(block, [], 1, own)

    scope = Frame(bindings={"test": []})
    accepts_block(Lambda([], lambda f: f.set("test", [1, 2, 3]), aliases=["test"]), scope)
    assert scope["test"] == [1, 2, 3]


def test_aliases_torn_down_when_body_raises(frame):
    frame.define("x", 0)
    block_frames = []

    def body(f):
        block_frames.append(f)
        f["x"] = 99
        raise RuntimeError("late")

    signal = invoke(Lambda([], body, aliases=["x"]), [], 0, frame)
    assert isinstance(signal, Failure)
    assert block_frames[0].links == {}
    assert frame["x"] == 99


def test_alias_clashing_with_parameter_fails(frame):
    signal = invoke(Lambda(["x"], lambda f: f["x"], aliases=["x"]), [1], 0, frame)
    assert isinstance(signal, Failure)
    assert isinstance(signal.error, InvalidArgument)


def accepts_block_and_returns_executed(block, frame=None):
    own = open_frame(frame, "accepts_block_and_returns_executed")
    signal = invoke(block, [], 1, own)
    if not isinstance(signal, Normal):
        return propagate(signal)
    return "executed"


def test_non_local_return_aborts_the_callers_caller():
    def helper():
        result = accepts_block_and_returns_executed(Lambda([], lambda f: NonLocalReturn(2, "aborted")))
        if is_signal(result):
            return settle(result)
        return "not aborted"

    assert helper() == "aborted"


def test_non_local_return_of_one_stops_only_the_invoking_function():
    def helper():
        result = accepts_block_and_returns_executed(Lambda([], lambda f: NonLocalReturn(1, "aborted")))
        if is_signal(result):
            return settle(result)
        return f"got {result}"

    assert helper() == "got aborted"


def test_without_return_the_function_completes():
    assert accepts_block_and_returns_executed(Lambda([], lambda f: None)) == "executed"


def test_as_block_coercions():
    assert as_block("identity") == FunctionRef("identity")

    wrapped = as_block(lambda a, *more: (a, more))
    assert isinstance(wrapped, Lambda)
    assert wrapped.params == ("a",)
    assert wrapped.rest == "more"

    with pytest.raises(EnumerableTypeError):
        as_block(3)


def test_wrapped_callable_skips_defaulted_parameters(frame):
    block = Lambda.wrap(lambda x, scale=10: x * scale)
    assert block.params == ("x",)
    assert invoke(block, [2], 0, frame) == Normal(20)


def test_malformed_lambdas_are_rejected():
    with pytest.raises(ArityError):
        Lambda(["a", "a"], lambda f: None)
    with pytest.raises(ArityError):
        Lambda(["a"], lambda f: None, rest="a")
    with pytest.raises(EnumerableTypeError):
        Lambda(["a"], "not callable")


def test_wrapping_callable_without_signature_accepts_any_argument_count(frame):
    block = Lambda.wrap(int)
    assert block.params == ()
    assert block.rest == "args"
    assert invoke(block, ["7"], 0, frame) == Normal(7)
    assert invoke(block, ["ff", 16], 0, frame) == Normal(255)


def test_wrapping_all_optional_callable_leaves_arity_to_the_call(frame):
    block = Lambda.wrap(lambda x=1, y=2: x + y)
    assert invoke(block, [], 0, frame) == Normal(3)
    assert invoke(block, [10], 0, frame) == Normal(12)
    signal = invoke(block, [1, 2, 3], 0, frame)
    assert isinstance(signal, Failure)
    assert isinstance(signal.error, TypeError)
