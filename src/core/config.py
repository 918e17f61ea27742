"""Core configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the
adapters read the Issuetrak connection settings the same way.

The connection settings have no defaults: a missing base URL, version or key
fails at construction with `pydantic.ValidationError`.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, AnyHttpUrl, Field, TypeAdapter, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "issuetrak-console"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "issuetrak-console"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "issuetrak-console"
    return Path.home() / ".config" / "issuetrak-console"


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
    """Add or update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# Issuetrak console user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


_ENV_FILES = (".env", str(get_user_env_file()))

_HTTP_URL = TypeAdapter(AnyHttpUrl)


def _require_http_url(value: str) -> str:
    """Reject anything that is not an absolute http(s) URL; keep the text as given."""

    try:
        _HTTP_URL.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"not a valid http(s) URL: {value!r}") from exc
    return value


HttpUrlText = Annotated[str, AfterValidator(_require_http_url)]


class AppSettings(BaseSettings):
    """Settings for the interactive operation menu.

    Environment variables use the `ISSUETRAK_` prefix, e.g.
    `ISSUETRAK_BASE_API_URL=http://local.issuetrakapi.com`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ISSUETRAK_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        # Project .env first (development), then the user's global config.
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
    )

    base_api_url: HttpUrlText = Field(
        ...,
        min_length=1,
        description="Endpoint URL of the deployed Issuetrak API.",
    )
    api_version: int = Field(
        ...,
        gt=0,
        description="Issuetrak API version number (e.g. 1).",
    )
    api_key: str = Field(
        ...,
        min_length=1,
        description="API key created with the Issuetrak key tool.",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="issuetrak-console/0.1",
        min_length=1,
        description="User-Agent sent with every API request.",
    )
    api_key_header: str = Field(
        default="X-Issuetrak-API-Key",
        min_length=1,
        description="Header that carries the API key.",
    )
    open_viewer: bool = Field(
        default=True,
        description="Open each rendered response with the system's default handler.",
    )
    clear_screen: bool = Field(
        default=True,
        description="Clear the console before the menu is shown.",
    )


class SubmitterSettings(BaseSettings):
    """Settings for the single-issue submission mode.

    This mode reads `url`, `api_version`, `api_key` and `username`
    (`ISSUETRAK_URL`, `ISSUETRAK_API_VERSION`, `ISSUETRAK_API_KEY`,
    `ISSUETRAK_USERNAME`).
    """

    model_config = SettingsConfigDict(
        env_prefix="ISSUETRAK_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
    )

    url: HttpUrlText = Field(..., min_length=1, description="Endpoint URL of the Issuetrak API.")
    api_version: int = Field(..., gt=0, description="Issuetrak API version number.")
    api_key: str = Field(..., min_length=1, description="Issuetrak API key.")
    username: str = Field(..., min_length=1, description="User recorded as the issue's author.")

    http_timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="issuetrak-console/0.1", min_length=1)
    api_key_header: str = Field(default="X-Issuetrak-API-Key", min_length=1)


def mask_secret(value: str) -> str:
    if len(value) <= 4:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


def describe_settings(settings: BaseSettings) -> Iterator[tuple[str, str]]:
    """Yield (env var, value) pairs for display, with the API key masked."""

    prefix = settings.model_config.get("env_prefix", "")
    for name, value in settings.model_dump().items():
        text = str(value)
        if name == "api_key":
            text = mask_secret(text)
        yield f"{prefix}{name.upper()}", text
