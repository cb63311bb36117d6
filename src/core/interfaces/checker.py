"""Contrato del verificador de disponibilidad.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Los tests pueden pasar un verificador falso sin tocar HTTP.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import LookupResult


@runtime_checkable
class AvailabilityChecker(Protocol):
    """Contrato mínimo para un backend de disponibilidad.

    Reglas de diseño:
    - `check` es síncrono: las peticiones se serializan una a una.
    - Un fallo del lote se señala con `core.errors.RegistrarError`.
    """

    def check(self, domains: Sequence[str]) -> list[LookupResult]:
        """Consulta un lote de dominios y devuelve sus resultados normalizados."""

        ...
