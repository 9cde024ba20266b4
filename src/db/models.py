from __future__ import annotations

from dataclasses import dataclass
import sqlite3

from core.controller import DEFAULT_DEBOUNCE_MS, DEFAULT_MIN_LIVE_CHARS
from core.lyrics_client import DEFAULT_BASE_URL


@dataclass
class Config:
    api_base_url: str = DEFAULT_BASE_URL
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    min_live_chars: int = DEFAULT_MIN_LIVE_CHARS

    @staticmethod
    def from_row(row: sqlite3.Row) -> "Config":
        keys = set(row.keys())
        def opt(k: str):
            return row[k] if k in keys else None

        return Config(
            api_base_url=row["api_base_url"] or DEFAULT_BASE_URL,
            debounce_ms=int(row["debounce_ms"] if row["debounce_ms"] is not None else DEFAULT_DEBOUNCE_MS),
            min_live_chars=int(opt("min_live_chars") if opt("min_live_chars") is not None else DEFAULT_MIN_LIVE_CHARS),
        )
