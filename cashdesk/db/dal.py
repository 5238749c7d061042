"""Data Access Layer for the user-account store.

Responsibilities
----------------
- Own exactly one SQLite connection per session. ``Database`` is a context
  manager: the connection opens on enter and is closed on every exit path,
  committing on a clean exit and rolling back when an exception escapes.
- Provide find/create/list helpers keyed by username.
"""

from __future__ import annotations

from pathlib import Path
import sqlite3
from typing import Any, Dict, List, Optional

from cashdesk.models.constants import ROLES


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    # ------------------------------------------------------------------
    # Connection helpers
    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def __enter__(self) -> "Database":
        if self._conn is not None:
            raise RuntimeError("Database session already open")
        self._conn = self._connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        conn, self._conn = self._conn, None
        if conn is None:
            return
        try:
            if exc_type is None:
                conn.commit()
            else:
                conn.rollback()
        finally:
            conn.close()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def _cursor(self) -> sqlite3.Cursor:
        if self._conn is None:
            raise RuntimeError("Database session is not open; use 'with Database(path) as db'")
        return self._conn.cursor()

    # ------------------------------------------------------------------
    # Users
    def find_user(self, username: str) -> Optional[Dict[str, Any]]:
        cur = self._cursor()
        cur.execute(
            "SELECT id, username, password_hash, role, created_at FROM users WHERE username = ?",
            (username,),
        )
        row = cur.fetchone()
        return dict(row) if row else None

    def create_user(self, username: str, password_hash: str, role: str) -> Dict[str, Any]:
        if role not in ROLES:
            raise ValueError(f"Unsupported role '{role}'. Allowed: {ROLES}")
        cur = self._cursor()
        try:
            cur.execute(
                "INSERT INTO users (username, password_hash, role) VALUES (?, ?, ?)",
                (username, password_hash, role),
            )
        except sqlite3.IntegrityError as e:
            raise ValueError(f"User '{username}' already exists") from e
        cur.execute(
            "SELECT id, username, password_hash, role, created_at FROM users WHERE id = ?",
            (cur.lastrowid,),
        )
        return dict(cur.fetchone())

    def list_users(self) -> List[Dict[str, Any]]:
        cur = self._cursor()
        cur.execute(
            "SELECT id, username, password_hash, role, created_at FROM users ORDER BY id"
        )
        return [dict(r) for r in cur.fetchall()]
