"""
work 表仓储层测试
"""
from __future__ import annotations

import pytest

from resume_backend.db import get_conn
from resume_backend.repository import UNSET, update_fields, work_repo


def _insert(conn, **overrides):
    fields = {
        "title": "Engineer",
        "company_name": "Acme",
        "description": "",
        "start_date_month": 3,
        "start_date_year": 2020,
        "end_date_month": None,
        "end_date_year": None,
        "is_current": 1,
    }
    fields.update(overrides)
    return work_repo.create(conn, **fields)


def _raw(conn, work_id):
    return dict(conn.execute("SELECT * FROM work WHERE id=?", (work_id,)).fetchone())


def test_create_and_get_by_id():
    with get_conn() as conn:
        wid = _insert(conn, description="backend")
        row = work_repo.get_by_id(conn, wid)
        assert row is not None
        assert row["id"] == wid
        assert row["title"] == "Engineer"
        assert row["description"] == "backend"
        assert row["end_date_month"] is None and row["end_date_year"] is None
        assert row["created_at"] == row["updated_at"]


def test_get_by_id_missing_returns_none():
    with get_conn() as conn:
        assert work_repo.get_by_id(conn, 999) is None


def test_values_are_bound_not_interpolated():
    title = "O'Reilly'); DROP TABLE work; --"
    with get_conn() as conn:
        wid = _insert(conn, title=title)
        assert work_repo.get_by_id(conn, wid)["title"] == title
        assert len(work_repo.get_all(conn)) == 1


def test_soft_delete_only_flips_deleted():
    with get_conn() as conn:
        wid = _insert(conn, is_current=0, end_date_month=5, end_date_year=2021)
        before = _raw(conn, wid)

        changed = work_repo.update_by_id(conn, wid, deleted=1)
        assert changed == 1

        after = _raw(conn, wid)
        assert after["deleted"] == 1
        for k in before:
            if k in ("deleted", "updated_at"):
                continue
            assert after[k] == before[k], k
        assert after["updated_at"] >= before["updated_at"]

        assert work_repo.get_by_id(conn, wid) is None
        assert work_repo.get_all(conn) == []


def test_partial_update_keeps_unset_and_writes_explicit_none():
    with get_conn() as conn:
        wid = _insert(conn, is_current=0, end_date_month=5, end_date_year=2021)

        work_repo.update_by_id(conn, wid, title="Lead Engineer")
        row = _raw(conn, wid)
        assert row["title"] == "Lead Engineer"
        assert row["company_name"] == "Acme"
        assert (row["end_date_month"], row["end_date_year"]) == (5, 2021)

        # switching to current clears the end date
        work_repo.update_by_id(conn, wid, is_current=1, end_date_month=None, end_date_year=None)
        row = _raw(conn, wid)
        assert row["is_current"] == 1
        assert row["end_date_month"] is None and row["end_date_year"] is None


def test_update_missing_row_returns_zero():
    with get_conn() as conn:
        assert work_repo.update_by_id(conn, 12345, title="x") == 0


def test_update_rejects_unknown_columns():
    with get_conn() as conn:
        wid = _insert(conn)
        with pytest.raises(TypeError):
            update_fields(conn, "work", work_repo.PATCH_COLUMNS, wid, {"created_at": "1999-01-01"})
        with pytest.raises(TypeError):
            work_repo.update_by_id(conn, wid, bogus=1)


def test_unset_marker_is_falsy_singleton():
    assert not UNSET
    assert repr(UNSET) == "UNSET"
    assert type(UNSET)() is UNSET


def test_get_all_ordering():
    with get_conn() as conn:
        old = _insert(conn, title="old", start_date_month=1, start_date_year=2015,
                      is_current=0, end_date_month=12, end_date_year=2016)
        ended = _insert(conn, title="ended", start_date_month=6, start_date_year=2020,
                        is_current=0, end_date_month=1, end_date_year=2021)
        current = _insert(conn, title="current", start_date_month=6, start_date_year=2020)
        newest = _insert(conn, title="newest", start_date_month=2, start_date_year=2022)

        ids = [r["id"] for r in work_repo.get_all(conn)]
        assert ids == [newest, current, ended, old]
