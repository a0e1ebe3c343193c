# Runtime configuration for the API Quest tracker. Every value can be
# overridden through environment variables or a local `.env` file.

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"Warning: invalid integer in {name}={raw!r}, using {default}")
        return default


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    """Process-wide settings."""

    host: str = "0.0.0.0"
    port: int = 3000
    no_listen: bool = False
    admin_api_token: Optional[str] = None
    log_level: str = "INFO"
    sse_keepalive_seconds: int = 15
    sse_queue_size: int = 8
    cors_origins: tuple = ("*",)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        return cls(
            host=os.getenv("TRACKER_HOST", "0.0.0.0"),
            port=_env_int("PORT", 3000),
            no_listen=_env_flag("TRACKER_NO_LISTEN"),
            admin_api_token=os.getenv("ADMIN_API_TOKEN") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            sse_keepalive_seconds=max(1, _env_int("SSE_KEEPALIVE_SECONDS", 15)),
            sse_queue_size=max(1, _env_int("SSE_QUEUE_SIZE", 8)),
            cors_origins=tuple(_env_list("CORS_ORIGINS", "*")),
        )


SETTINGS = Settings.from_env()
