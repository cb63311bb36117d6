"""Shared pytest fixtures and test helpers for names-lookup tests."""

from __future__ import annotations

import json
from typing import Callable, Sequence

import httpx
import pytest
from typer.testing import CliRunner

from core.config import AppSettings
from core.domain.models import LookupResult
from core.errors import RegistrarError

REGISTRAR_URL = "https://registrar.test"


class FakeChecker:
    """In-memory `AvailabilityChecker` recording every batch it receives."""

    def __init__(
        self,
        available: dict[str, dict] | None = None,
        fail_calls: set[int] | None = None,
    ) -> None:
        self.available = available or {}
        self.fail_calls = fail_calls or set()
        self.calls: list[list[str]] = []

    def check(self, domains: Sequence[str]) -> list[LookupResult]:
        call_number = len(self.calls)
        self.calls.append(list(domains))
        if call_number in self.fail_calls:
            raise RegistrarError("HTTP 429", status_code=429, body='{"code":"TOO_MANY_REQUESTS"}')
        results = []
        for domain in domains:
            extra = self.available.get(domain)
            if extra is None:
                results.append(LookupResult(domain=domain, available=False, price=12_990_000, period=1))
            else:
                results.append(LookupResult(domain=domain, available=True, **extra))
        return results


def registrar_handler(
    available: dict[str, dict] | None = None,
    seen: list[httpx.Request] | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport handler emulating the bulk availability endpoint."""

    available = available or {}

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        domains = json.loads(request.content)
        payload = []
        for domain in domains:
            if domain in available:
                payload.append({"domain": domain, "available": True, **available[domain]})
            else:
                payload.append({"domain": domain, "available": False, "definitive": True})
        return httpx.Response(200, json={"domains": payload})

    return handler


@pytest.fixture
def settings() -> AppSettings:
    """Settings with test credentials, isolated from any .env file."""
    return AppSettings(
        _env_file=None,
        GODADDY_API_KEY="key",
        GODADDY_API_SECRET="secret",
        GODADDY_URL=REGISTRAR_URL,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def registrar_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Registrar credentials in the environment and a clean working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GODADDY_API_KEY", "key")
    monkeypatch.setenv("GODADDY_API_SECRET", "secret")
    monkeypatch.setenv("GODADDY_URL", REGISTRAR_URL)
    monkeypatch.setenv("NAMES_LOOKUP_DELAY_MS", "0")
