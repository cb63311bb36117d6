"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/registrar) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REGISTRAR_URL = "https://api.ote-godaddy.com"
DEFAULT_BATCH_SIZE = 50
DEFAULT_DELAY_MS = 2000


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "names-lookup"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "names-lookup"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "names-lookup"
    return Path.home() / ".config" / "names-lookup"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# names-lookup user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Las credenciales del registrar aceptan los nombres históricos
    (`GODADDY_API_KEY`, `GODADDY_API_SECRET`, `GODADDY_URL`) además del
    prefijo `NAMES_LOOKUP_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="NAMES_LOOKUP_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GODADDY_API_KEY", "NAMES_LOOKUP_API_KEY"),
        description="API key del registrar (cabecera sso-key).",
    )
    api_secret: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GODADDY_API_SECRET", "NAMES_LOOKUP_API_SECRET"),
        description="API secret del registrar (cabecera sso-key).",
    )
    api_url: str = Field(
        default=DEFAULT_REGISTRAR_URL,
        validation_alias=AliasChoices("GODADDY_URL", "NAMES_LOOKUP_API_URL"),
        description="Base URL de la API (por defecto el sandbox OTE).",
    )

    batch_size: int = Field(
        default=DEFAULT_BATCH_SIZE,
        ge=1,
        le=500,
        description="Dominios por petición de disponibilidad.",
    )
    delay_ms: int = Field(
        default=DEFAULT_DELAY_MS,
        ge=0,
        description="Pausa entre lotes del mismo TLD (milisegundos).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). Sin definir = sin timeout.",
    )
    user_agent: str = Field(
        default="names-lookup/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones al registrar.",
    )

    @field_validator("api_url", mode="before")
    @classmethod
    def _blank_url_uses_default(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return DEFAULT_REGISTRAR_URL
        return value

    def missing_credentials(self) -> list[str]:
        """Nombres de las variables obligatorias que faltan."""

        missing: list[str] = []
        if not self.api_key:
            missing.append("GODADDY_API_KEY")
        if not self.api_secret:
            missing.append("GODADDY_API_SECRET")
        if not self.api_url:
            missing.append("GODADDY_URL")
        return missing
