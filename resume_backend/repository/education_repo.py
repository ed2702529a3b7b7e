"""
教育经历数据访问层（education 表）
日期采用 start/end 的 (month, year) 分列存储，与 work 表一致。
"""
from __future__ import annotations

from sqlite3 import Connection, Row
from typing import Any, Optional

from . import UNSET, now_ts, update_fields

COLUMNS = (
    "id", "degree", "subject", "school_name", "description",
    "start_date_month", "start_date_year", "end_date_month", "end_date_year",
    "is_current", "created_at", "updated_at",
)

PATCH_COLUMNS = (
    "degree", "subject", "school_name", "description",
    "start_date_month", "start_date_year", "end_date_month", "end_date_year",
    "is_current", "deleted",
)

_SELECT = f"SELECT {', '.join(COLUMNS)} FROM education"


def get_all(conn: Connection) -> list[Row]:
    return conn.execute(
        _SELECT + " WHERE deleted = 0 "
        "ORDER BY start_date_year DESC, start_date_month DESC, is_current DESC, "
        "end_date_year DESC, end_date_month DESC, id DESC"
    ).fetchall()


def get_by_id(conn: Connection, education_id: int) -> Optional[Row]:
    return conn.execute(_SELECT + " WHERE id = ? AND deleted = 0", (education_id,)).fetchone()


def create(
    conn: Connection,
    *,
    degree: str,
    subject: str,
    school_name: str,
    description: str,
    start_date_month: int,
    start_date_year: int,
    end_date_month: int | None,
    end_date_year: int | None,
    is_current: int,
) -> int:
    now = now_ts()
    cur = conn.execute(
        "INSERT INTO education(degree, subject, school_name, description, start_date_month, start_date_year, "
        "end_date_month, end_date_year, is_current, created_at, updated_at) "
        "VALUES(?,?,?,?,?,?,?,?,?,?,?)",
        (degree, subject, school_name, description, start_date_month, start_date_year,
         end_date_month, end_date_year, is_current, now, now),
    )
    return int(cur.lastrowid)


def update_by_id(
    conn: Connection,
    education_id: int,
    *,
    degree: Any = UNSET,
    subject: Any = UNSET,
    school_name: Any = UNSET,
    description: Any = UNSET,
    start_date_month: Any = UNSET,
    start_date_year: Any = UNSET,
    end_date_month: Any = UNSET,
    end_date_year: Any = UNSET,
    is_current: Any = UNSET,
    deleted: Any = UNSET,
) -> int:
    patch = {
        "degree": degree,
        "subject": subject,
        "school_name": school_name,
        "description": description,
        "start_date_month": start_date_month,
        "start_date_year": start_date_year,
        "end_date_month": end_date_month,
        "end_date_year": end_date_year,
        "is_current": is_current,
        "deleted": deleted,
    }
    return update_fields(conn, "education", PATCH_COLUMNS, education_id, patch)
