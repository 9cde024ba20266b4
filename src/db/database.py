import logging
import os
import sqlite3
from typing import Optional

from db.models import Config
from db.schema import SCHEMA_V1_SQL

logger = logging.getLogger(__name__)

CURRENT_DB_VERSION = 1

def initialize_database(app_data_dir: str) -> sqlite3.Connection:
    os.makedirs(app_data_dir, exist_ok=True)
    sqlite_path = os.path.join(app_data_dir, "db.sqlite3")
    logger.info("Database file path: %s", sqlite_path)

    db = open_database(sqlite_path)
    return db

def open_database(sqlite_path: str) -> sqlite3.Connection:
    db = sqlite3.connect(sqlite_path)
    db.row_factory = sqlite3.Row

    existing_version = int(db.execute("PRAGMA user_version").fetchone()[0])
    upgrade_database_if_needed(db, existing_version)

    return db

def upgrade_database_if_needed(db: sqlite3.Connection, existing_version: int) -> None:
    logger.info("Existing database version: %s", existing_version)

    if existing_version >= CURRENT_DB_VERSION:
        return

    # v1
    if existing_version <= 0:
        logger.info("Migrate database version 1...")
        db.execute("PRAGMA journal_mode=WAL")
        db.execute("PRAGMA user_version=1")
        db.executescript(SCHEMA_V1_SQL)
        db.commit()

# -------------------------------
# CONFIG
# -------------------------------
def get_config(db: sqlite3.Connection) -> Config:
    row = db.execute("""
        SELECT api_base_url,
               debounce_ms,
               min_live_chars
        FROM config_data
        LIMIT 1
    """).fetchone()
    if row is None:
        return Config()
    return Config.from_row(row)


def set_config(db: sqlite3.Connection, config: Config):
    db.execute("""
        UPDATE config_data
        SET api_base_url = ?,
            debounce_ms = ?,
            min_live_chars = ?
        WHERE 1
    """, (
        config.api_base_url,
        int(config.debounce_ms),
        int(config.min_live_chars),
    ))
    db.commit()

# -------------------------------
# KEY-VALUE SLOTS
# -------------------------------
def get_item(db: sqlite3.Connection, key: str) -> Optional[str]:
    row = db.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
    return row["value"] if row else None


def set_item(db: sqlite3.Connection, key: str, value: str) -> None:
    db.execute("""
        INSERT INTO kv_store (key, value) VALUES (?, ?)
        ON CONFLICT(key) DO UPDATE SET value = excluded.value
    """, (key, value))
    db.commit()


class SqliteStorage:
    """KeyValueStorage backed by the kv_store table."""

    def __init__(self, db: sqlite3.Connection):
        self.db = db

    def get_item(self, key: str) -> Optional[str]:
        return get_item(self.db, key)

    def set_item(self, key: str, value: str) -> None:
        set_item(self.db, key, value)
