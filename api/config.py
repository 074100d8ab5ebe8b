"""
Application settings.

Values come from environment variables, optionally loaded from a `.env` file
in the project directory.

Environment variables (all optional):
- SEED_URL: JSON feed used to seed the transaction store
- SEED_TIMEOUT_SECONDS: HTTP timeout for the seed fetch
- SEED_ON_STARTUP: "false" disables seeding when the app starts
- CORS_ORIGINS: Comma-separated list of allowed origins ("*" for all)
- LOG_LEVEL: Logging level name
- HOST / PORT: Bind address for scripts/serve.py
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Look for .env in the project directory
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DEFAULT_SEED_URL = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid environment variable: {name}={raw!r} is not an integer.") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"Invalid environment variable: {name}={raw!r} is not a number.") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise RuntimeError(f"Invalid environment variable: {name}={raw!r} is not a boolean.")


@dataclass(frozen=True, slots=True)
class Settings:
    seed_url: str = DEFAULT_SEED_URL
    seed_timeout_seconds: float = 30.0
    seed_on_startup: bool = True
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment, falling back to defaults."""

        origins = os.getenv("CORS_ORIGINS", "*")

        return cls(
            seed_url=os.getenv("SEED_URL", DEFAULT_SEED_URL),
            seed_timeout_seconds=_env_float("SEED_TIMEOUT_SECONDS", 30.0),
            seed_on_startup=_env_bool("SEED_ON_STARTUP", True),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", 3000),
        )


__all__ = ["DEFAULT_SEED_URL", "Settings"]
