"""Verificador de disponibilidad: GoDaddy.

Usa el endpoint bulk `POST /v1/domains/available?checkType=FAST`:
- cuerpo: array JSON de dominios
- respuesta: `{"domains": [{domain, available, price?, currency?, period?}]}`
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import LookupResult
from core.errors import ConfigurationError, RegistrarError
from core.interfaces.checker import AvailabilityChecker

AVAILABLE_PATH = "/v1/domains/available"
CHECK_TYPE = "FAST"


class GoDaddyAvailabilityChecker(AvailabilityChecker):
    """Consulta disponibilidad por lotes contra la API de GoDaddy."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        on_invalid: Callable[[object, str], None] | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._on_invalid = on_invalid
        missing = self._settings.missing_credentials()
        if missing:
            raise ConfigurationError(missing)

        self._url = self._settings.api_url.rstrip("/") + AVAILABLE_PATH
        self._client = build_client(
            self._settings,
            extra_headers={
                "Authorization": f"sso-key {self._settings.api_key}:{self._settings.api_secret}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    def __enter__(self) -> "GoDaddyAvailabilityChecker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def check(self, domains: Sequence[str]) -> list[LookupResult]:
        try:
            response = self._client.post(
                self._url,
                params={"checkType": CHECK_TYPE},
                json=list(domains),
            )
        except httpx.HTTPError as exc:
            raise RegistrarError(f"Request failed: {exc}") from exc

        if not response.is_success:
            raise RegistrarError(
                f"HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise RegistrarError(
                "Invalid JSON in response",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        raw_domains = payload.get("domains") if isinstance(payload, dict) else None
        if not isinstance(raw_domains, list):
            return []

        results: list[LookupResult] = []
        for item in raw_domains:
            if not isinstance(item, dict):
                self._report_invalid(item, "entry is not an object")
                continue
            try:
                results.append(LookupResult.model_validate(item))
            except ValidationError as exc:
                reason = "; ".join(
                    f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
                )
                self._report_invalid(item, reason)
        return results

    def _report_invalid(self, item: object, reason: str) -> None:
        if self._on_invalid:
            self._on_invalid(item, reason)
