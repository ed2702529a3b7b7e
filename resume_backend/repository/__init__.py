"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused, so services avoid SQL strings.
Every value goes through a `?` placeholder; column names only ever come
from the fixed tuples declared in each *_repo module.
"""
from __future__ import annotations

import datetime as dt
from sqlite3 import Connection
from typing import Any, Iterable


class _Unset:
    """Marker for "field not supplied" in partial updates (None means NULL)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def now_ts() -> str:
    return dt.datetime.now().isoformat(timespec="microseconds")


def update_fields(conn: Connection, table: str, columns: Iterable[str], row_id: int, patch: dict[str, Any]) -> int:
    """
    UPDATE only the columns present in `patch` (values that are not UNSET);
    updated_at is always refreshed. Returns the number of rows changed.
    """
    allowed = set(columns)
    unknown = sorted(k for k in patch if k not in allowed)
    if unknown:
        raise TypeError(f"unknown {table} fields: {', '.join(unknown)}")

    sets = []
    params: list[Any] = []
    for col in columns:
        v = patch.get(col, UNSET)
        if v is UNSET:
            continue
        sets.append(f"{col}=?")
        params.append(v)
    sets.append("updated_at=?")
    params.append(now_ts())
    params.append(row_id)

    sql = f"UPDATE {table} SET {', '.join(sets)} WHERE id=?"
    cur = conn.execute(sql, params)
    return int(cur.rowcount)
