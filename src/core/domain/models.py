"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida en el borde la respuesta del registrar sin acoplar el Core a HTTP.
- Facilita la serialización del índice de disponibilidad.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

MICROS_PER_UNIT = 1_000_000
CENTS = Decimal("0.01")
DEFAULT_CURRENCY = "USD"


def format_price(price: int | None, currency: str | None = None) -> str:
    """`"<CCY> <precio>"` con dos decimales, o `"price n/a"` sin precio.

    Los empates exactos del float se redondean alejándose de cero; 1.125
    da 1.13 y 1.005 (guardado como 1.00499...) da 1.00.
    """

    if price is None:
        return "price n/a"
    unit_price = Decimal(price / MICROS_PER_UNIT).quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{currency or DEFAULT_CURRENCY} {unit_price}"


class LookupResult(BaseModel):
    """Resultado de disponibilidad de un dominio candidato."""

    model_config = ConfigDict(extra="ignore")

    domain: str = Field(
        ...,
        min_length=1,
        description="Dominio consultado (nombre + TLD).",
    )
    available: bool = Field(
        default=False,
        description="Indica si el registrar lo reporta como disponible.",
    )
    price: int | None = Field(
        default=None,
        description="Precio en micros (1/1_000_000 de la unidad monetaria).",
    )
    currency: str | None = Field(
        default=None,
        description="Código de moneda ISO; USD si falta.",
    )
    period: int | None = Field(
        default=None,
        description="Periodo de registro en años.",
    )

    def period_suffix(self) -> str:
        return f"/{self.period}y" if self.period else ""

    def label(self) -> str:
        """Texto de presentación: `"<domain> (<CCY> <precio>/<N>y)"`."""

        price_label = format_price(self.price, self.currency)
        return f"{self.domain} ({price_label}{self.period_suffix()})"


class LookupRequest(BaseModel):
    """Parámetros normalizados de una ejecución."""

    names: list[str] = Field(
        ...,
        min_length=1,
        description="Nombres en minúsculas, sin duplicados, en orden de aparición.",
    )
    tlds: list[str] = Field(
        ...,
        min_length=1,
        description="TLDs con punto inicial, sin duplicados, en orden de aparición.",
    )
    batch_size: int = Field(default=50, ge=1)
    delay_ms: int = Field(default=2000, ge=0)

    @property
    def total_combinations(self) -> int:
        return len(self.names) * len(self.tlds)


class AvailabilityIndex(BaseModel):
    """Agregado principal: TLD -> dominios disponibles formateados.

    Se inicializa con todos los TLDs pedidos para que los TLDs sin
    resultados aparezcan con lista vacía en la salida.
    """

    available: dict[str, list[str]] = Field(default_factory=dict)
    checked: dict[str, int] = Field(
        default_factory=dict,
        description="Candidatos reportados por el registrar, por TLD.",
    )

    @classmethod
    def for_tlds(cls, tlds: list[str]) -> "AvailabilityIndex":
        return cls(
            available={tld: [] for tld in tlds},
            checked={tld: 0 for tld in tlds},
        )

    def record(self, tld: str, result: LookupResult) -> None:
        if tld not in self.available:
            raise KeyError(f"TLD not requested: {tld}")
        self.checked[tld] += 1
        if result.available:
            self.available[tld].append(result.label())

    def to_payload(self) -> dict[str, list[str]]:
        return {tld: list(entries) for tld, entries in self.available.items()}
