from __future__ import annotations

SCHEMA_V1_SQL = """
CREATE TABLE config_data (
    id INTEGER PRIMARY KEY,
    api_base_url TEXT,
    debounce_ms INTEGER,
    min_live_chars INTEGER
);

CREATE TABLE kv_store (
    key TEXT PRIMARY KEY,
    value TEXT
);

INSERT INTO config_data (api_base_url, debounce_ms, min_live_chars) VALUES ('https://api.lyrics.ovh', 700, 2);
"""
