import pytest

from enumerable.config import reset_config_cache
from enumerable.function_registry import get_registry
from enumerable.types.frame import Frame

# Tests may register their own named functions. The registry is a process-wide
# singleton, so an autouse fixture snapshots it before each test and restores
# it afterwards; builtins registered lazily on first use are kept.


@pytest.fixture
def frame():
    """A root frame standing in for the Python code that calls a combinator."""
    return Frame(name="caller")


@pytest.fixture(autouse=True)
def _isolate_registry():
    registry = get_registry()
    saved = dict(registry.all())
    yield registry
    registry.all().clear()
    registry.all().update(saved)


@pytest.fixture(autouse=True)
def _fresh_config():
    # Settings are cached on first use; tests that monkeypatch the environment
    # call reset_config_cache themselves after setting it.
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture
def calls():
    """A list blocks can append to, for counting how often they ran."""
    return []
