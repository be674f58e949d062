import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from negotiation_middleware.http.messages import Response, ServerRequest  # noqa: E402


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def clean_negotiation_env(monkeypatch):
    """Keep host NEGOTIATION_* variables from leaking into settings tests."""
    for name in ("NEGOTIATION_PRIORITIES", "NEGOTIATION_SUPPLY_DEFAULT", "NEGOTIATION_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def priorities():
    return ["application/json", "text/html"]


@pytest.fixture
def make_request():
    """Build a request with an optional accept header."""

    def _make(accept=None, **kwargs):
        headers = kwargs.pop("headers", {})
        if accept is not None:
            headers["Accept"] = accept
        return ServerRequest(headers=headers, **kwargs)

    return _make


@pytest.fixture
def response():
    return Response()


class RecordingHandler:
    """Terminal handler that records the calls it receives."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, request, response):
        self.calls.append((request, response))
        return self.result if self.result is not None else response


@pytest.fixture
def recording_handler():
    return RecordingHandler(result=Response(status_code=200, body=b"downstream"))
