import httpx
import pytest


@pytest.fixture
def mock_client():
    """
    Build an AsyncClient answered by `handler`. Returns (client, calls) where
    calls collects every request the client sent.
    """
    def _make(handler):
        calls = []

        def recording(request: httpx.Request):
            calls.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(recording)), calls
    return _make
