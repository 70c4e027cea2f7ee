from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    allowed_origins: list[str]
    content_dir: Path
    site_url: str
    posts_cache_ttl_seconds: int

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("ALLOWED_ORIGINS", "*")
        allowed = [o.strip() for o in origins.split(",")] if origins != "*" else ["*"]
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            allowed_origins=allowed,
            content_dir=Path(os.getenv("CONTENT_DIR") or BASE_DIR / "content"),
            site_url=os.getenv("SITE_URL", "https://example.com").rstrip("/"),
            posts_cache_ttl_seconds=_int_env("POSTS_CACHE_TTL_SECONDS", 300),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
