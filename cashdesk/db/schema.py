"""Database schema DDL definitions and initialization utilities.

Tables:
  - users: bootstrap / operator accounts (username unique, bcrypt hash, role)
"""

from __future__ import annotations
import sqlite3
from typing import Sequence
from pathlib import Path

BASIC_UTC_NOW = "strftime('%Y-%m-%dT%H:%M:%fZ','now')"

USERS_DDL = f"""
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    role TEXT NOT NULL DEFAULT 'user' CHECK (role IN ('admin','user')),
    created_at TEXT NOT NULL DEFAULT ({BASIC_UTC_NOW})
);
"""

USERS_ROLE_INDEX_DDL = "CREATE INDEX IF NOT EXISTS idx_users_role ON users(role);"

ALL_DDL: Sequence[str] = (USERS_DDL, USERS_ROLE_INDEX_DDL)


def init_db(db_path: Path) -> None:
    """Create tables if they do not exist (idempotent)."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.cursor()
        for ddl in ALL_DDL:
            cur.execute(ddl)
        conn.commit()
    finally:
        conn.close()
