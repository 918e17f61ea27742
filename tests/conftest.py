"""Shared pytest fixtures for all tests."""

import io
import os
from collections.abc import Callable

import httpx
import pytest
from rich.console import Console

from adapters.issuetrak_client import IssuetrakAPIClient
from core.config import AppSettings, SubmitterSettings
from core.domain.api import ApiResponse


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep real ISSUETRAK_* variables and .env files out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("ISSUETRAK_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setitem(AppSettings.model_config, "env_file", None)
    monkeypatch.setitem(SubmitterSettings.model_config, "env_file", None)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        base_api_url="http://issuetrak.test",
        api_version=1,
        api_key="secret-key",
        open_viewer=False,
        clear_screen=False,
    )


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


class RecordingRenderer:
    """Renderer double that keeps what it was asked to render."""

    def __init__(self):
        self.rendered: list[tuple[str, ApiResponse]] = []

    def render(self, description: str, response: ApiResponse) -> None:
        self.rendered.append((description, response))


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    return RecordingRenderer()


class RecordingTransport:
    """Wraps `httpx.MockTransport` and keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response] | None = None):
        self.requests: list[httpx.Request] = []
        self._handler = handler or (lambda request: httpx.Response(200, json={"ok": True}))
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def client_factory(self):
        def factory(api_key, settings):
            return IssuetrakAPIClient(api_key, settings, transport=self.transport)

        return factory


@pytest.fixture
def make_transport() -> type[RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()
