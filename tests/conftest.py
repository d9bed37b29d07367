import httpx
import pytest

from risp.builtins import register
from risp.interpreter import Interpreter
from risp.types.environment import Environment


def _json_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        headers=[("x-first", "1"), ("x-second", "2")],
        json={"id": 1, "tags": ["a", "b"]},
    )


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded (network mocked)."""
    e = Environment()
    register(e, transport=httpx.MockTransport(_json_handler))
    return e


@pytest.fixture
def interp():
    return Interpreter(transport=httpx.MockTransport(_json_handler))
