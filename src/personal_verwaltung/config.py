"""
Konfiguration über Umgebungsvariablen.

- PERSONAL_AUTO_FILE: Datei für den auto-Modus (Standard "test")
- PERSONAL_LOG_LEVEL: Logging-Level (Standard WARNING, damit das Menü lesbar bleibt)
- PERSONAL_ENCODING: Encoding der Datendatei (Standard utf-8)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    """Typisierte Sicht auf die Umgebungsvariablen."""

    auto_file: str
    log_level: int
    encoding: str


@lru_cache
def get_settings() -> Settings:
    """Liest die Umgebung und baut die Settings."""
    def _level(value: str | None, default: int = logging.WARNING) -> int:
        if not value:
            return default
        level = logging.getLevelName(value.strip().upper())
        return level if isinstance(level, int) else default

    return Settings(
        auto_file=os.getenv("PERSONAL_AUTO_FILE") or "test",
        log_level=_level(os.getenv("PERSONAL_LOG_LEVEL")),
        encoding=os.getenv("PERSONAL_ENCODING") or "utf-8",
    )
