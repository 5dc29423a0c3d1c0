"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_ERGAST_BASE_URL = "https://ergast.com/api/f1"
DEFAULT_OPENF1_BASE_URL = "https://api.openf1.org/v1"


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    ergast_base_url: str = DEFAULT_ERGAST_BASE_URL
    openf1_base_url: str = DEFAULT_OPENF1_BASE_URL
    upstream_timeout: float = 30.0
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    static_dir: str | None = "public"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> Settings:
        env = os.environ
        return cls(
            ergast_base_url=env.get("ERGAST_BASE_URL", DEFAULT_ERGAST_BASE_URL),
            openf1_base_url=env.get("OPENF1_BASE_URL", DEFAULT_OPENF1_BASE_URL),
            upstream_timeout=float(env.get("UPSTREAM_TIMEOUT", "30")),
            cors_origins=_split(env.get("CORS_ORIGINS", "*")),
            static_dir=env.get("STATIC_DIR", "public") or None,
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT", "3000")),
            log_level=env.get("LOG_LEVEL", "INFO"),
            log_file=env.get("LOG_FILE") or None,
        )
