"""Exportación JSON del índice de disponibilidad.

Formato: objeto `{TLD: [dominio formateado, ...]}` con indentación de 2
espacios. Se escribe una sola vez al final y sobrescribe el fichero.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import AvailabilityIndex


def export_availability_json(*, index: AvailabilityIndex, output_path: Path) -> Path:
    """Exporta `AvailabilityIndex` a JSON UTF-8 conservando el orden de TLDs."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(index.to_payload(), ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return output_path
