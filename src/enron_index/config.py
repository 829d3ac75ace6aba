"""Application configuration utilities."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

# Load settings from a .env file if present. The file is expected at the project root.
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _get_optional(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """Strongly typed configuration wrapper."""

    maildir_path: Path = field(
        default_factory=lambda: Path(
            os.getenv("MAILDIR_PATH", str(PROJECT_ROOT / "maildir"))
        ).expanduser()
    )
    index_name: str = field(default_factory=lambda: os.getenv("INDEX_NAME", "EnronEmail"))
    batch_size: int = field(default_factory=lambda: _get_int("BATCH_SIZE", 100))
    file_encoding: str = field(default_factory=lambda: os.getenv("FILE_ENCODING", "utf-8"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    weaviate_host: str = field(default_factory=lambda: os.getenv("WEAVIATE_HOST", "localhost"))
    weaviate_port: int = field(default_factory=lambda: _get_int("WEAVIATE_PORT", 8080))
    weaviate_grpc_port: int = field(default_factory=lambda: _get_int("WEAVIATE_GRPC_PORT", 50051))
    weaviate_api_key: Optional[str] = field(default_factory=lambda: _get_optional("WEAVIATE_API_KEY"))

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError(f"BATCH_SIZE must be positive, got {self.batch_size}")

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        """Extra HTTP headers for the Weaviate connection."""
        if self.weaviate_api_key:
            return {"X-API-KEY": self.weaviate_api_key}
        return None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
