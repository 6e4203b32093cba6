import httpx
import pytest

import janproxy.core.bihinkanri as bihinkanri_mod
from janproxy.core.config import settings


class UpstreamStub:
    """Installs an httpx.MockTransport in place of the real spec-form API."""

    def __init__(self, monkeypatch):
        self.monkeypatch = monkeypatch
        self.requests = []
        self._handler = None
        monkeypatch.setattr(bihinkanri_mod, "_build_client", self._build_client)

    def _build_client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self._dispatch))

    async def _dispatch(self, request):
        self.requests.append(request)
        result = self._handler(request)
        if hasattr(result, "__await__"):
            result = await result
        return result

    def respond(self, status_code=200, json=None, text=None):
        def handler(request):
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, text=text or "")

        self._handler = handler

    def raise_error(self, exc_type):
        def handler(request):
            raise exc_type("simulated", request=request)

        self._handler = handler

    def set_handler(self, handler):
        self._handler = handler


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setattr(settings, "BIHINKANRI_API_KEY", "ApiKey_test")
    monkeypatch.setattr(settings, "BIHINKANRI_ACCOUNT_ID", "1234")
    monkeypatch.setattr(settings, "BIHINKANRI_API_BASE", "https://spec.example.test/prod")


@pytest.fixture
def upstream(monkeypatch, credentials):
    return UpstreamStub(monkeypatch)
