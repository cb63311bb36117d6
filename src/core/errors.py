"""Errores del dominio.

Dos familias:
- Fatales (entrada/configuración): la CLI termina con código 1.
- Por lote (registrar): el pipeline los reporta y continúa.
"""

from __future__ import annotations


class NamesLookupError(Exception):
    """Base de todos los errores de la aplicación."""


class InputError(NamesLookupError):
    """Nombres o TLDs ausentes o vacíos tras normalizar."""


class ConfigurationError(NamesLookupError):
    """Credenciales del registrar ausentes."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing registrar API credentials: {', '.join(self.missing)}")


class RegistrarError(NamesLookupError):
    """Fallo de una petición al registrar (HTTP no-2xx, red o JSON inválido)."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)
