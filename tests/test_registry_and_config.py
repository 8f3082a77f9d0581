import logging

import pytest

from enumerable import Break, FunctionRef, define_function, function, get_registry
from enumerable import combinators as _
from enumerable.combinators import COMBINATORS
from enumerable.config import get_falsy_words, get_log_level, reset_config_cache
from enumerable.errors import EnumerableTypeError, UnknownFunction
from enumerable.logger import logger, setup_logger
from enumerable.truth import truthy


def test_builtins_are_registered():
    registry = get_registry()
    for name in ("identity", "truthy", "not", "first", "initial", "index_of", "zip", "unzip"):
        assert name in registry


def test_define_function_makes_name_usable_as_block():
    define_function("square", lambda x: x * x)
    assert _.map([1, 2, 3], "square") == [1, 4, 9]
    assert _.map([1, 2, 3], FunctionRef("square")) == [1, 4, 9]


def test_function_decorator_registers_under_own_or_given_name():
    @function()
    def shout(s):
        return s.upper()

    @function("whisper")
    def _lower(s):
        return s.lower()

    assert _.map(["a"], "shout") == ["A"]
    assert _.map(["B"], "whisper") == ["b"]


def test_registry_isolated_between_tests():
    assert "square" not in get_registry()
    assert "shout" not in get_registry()


def test_resolve_unknown_raises():
    with pytest.raises(UnknownFunction):
        get_registry().resolve("never_defined")


def test_unknown_function_in_combinator_raises():
    with pytest.raises(UnknownFunction):
        _.map([1], "never_defined")


def test_registering_non_callable_is_rejected():
    with pytest.raises(EnumerableTypeError):
        define_function("bad", 3)


def test_combinator_table_is_complete():
    expected = {
        "each", "each_with_index", "each_slice", "times", "map", "sort_by", "group_by",
        "reduce", "reduce_right", "find", "detect", "filter", "select", "reject",
        "partition", "all", "any", "every", "some", "take_while", "min", "max", "zip", "unzip",
        "index_of", "first", "initial",
    }
    assert set(COMBINATORS) == expected
    assert COMBINATORS["map"] is _.map


@pytest.mark.parametrize(
    "value",
    ["", "0", "f", "F", "fa", "false", "FALSE", " no ", "n", "of", "off", 0, None, [], {}, False],
)
def test_falsy_values(value):
    assert truthy(value) is False


@pytest.mark.parametrize("value", ["true", "yes", "on", "1", "nope", "offset", 1, [0], True, "x"])
def test_truthy_values(value):
    assert truthy(value) is True


def test_falsy_words_from_environment(monkeypatch):
    monkeypatch.setenv("ENUMERABLE_FALSY_WORDS", "nein, Non")
    reset_config_cache()
    assert get_falsy_words() == frozenset({"nein", "non"})
    assert truthy("NEIN") is False
    assert truthy("false") is True


def test_falsy_words_are_read_once_until_reset(monkeypatch):
    monkeypatch.delenv("ENUMERABLE_FALSY_WORDS", raising=False)
    reset_config_cache()
    assert truthy("off") is False
    monkeypatch.setenv("ENUMERABLE_FALSY_WORDS", "nein")
    assert get_falsy_words() is get_falsy_words()
    assert truthy("off") is False
    reset_config_cache()
    assert truthy("off") is True
    assert truthy("nein") is False


def test_default_falsy_words(monkeypatch):
    monkeypatch.delenv("ENUMERABLE_FALSY_WORDS", raising=False)
    reset_config_cache()
    assert "off" in get_falsy_words()
    assert "nope" not in get_falsy_words()


def test_log_level_from_environment(monkeypatch):
    monkeypatch.delenv("ENUMERABLE_LOG_LEVEL", raising=False)
    assert get_log_level() == "WARNING"
    monkeypatch.setenv("ENUMERABLE_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_setup_logger_configures_named_logger(monkeypatch):
    monkeypatch.setenv("ENUMERABLE_LOG_LEVEL", "INFO")
    log = setup_logger("enumerable.test_setup")
    assert log.level == logging.INFO
    assert len(log.handlers) == 1
    # A second call does not stack handlers
    assert setup_logger("enumerable.test_setup") is log
    assert len(log.handlers) == 1
    assert log.propagate is False


def test_package_logger_only_has_null_handler_on_import():
    assert logger.name == "enumerable"
    assert logger.handlers
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_package_records_reach_application_handlers(caplog):
    caplog.set_level(logging.DEBUG, logger="enumerable")
    assert _.each([1, 2], lambda x: Break(x)) == Break(1)
    assert any(r.name == "enumerable" and "passing" in r.getMessage() for r in caplog.records)
