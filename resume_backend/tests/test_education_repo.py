from __future__ import annotations

from resume_backend.db import get_conn
from resume_backend.repository import education_repo


def _insert(conn, **overrides):
    fields = {
        "degree": "BSc",
        "subject": "Computer Science",
        "school_name": "State University",
        "description": "",
        "start_date_month": 9,
        "start_date_year": 2012,
        "end_date_month": 6,
        "end_date_year": 2016,
        "is_current": 0,
    }
    fields.update(overrides)
    return education_repo.create(conn, **fields)


def test_create_get_and_soft_delete():
    with get_conn() as conn:
        eid = _insert(conn)
        row = education_repo.get_by_id(conn, eid)
        assert row["school_name"] == "State University"
        assert (row["start_date_month"], row["start_date_year"]) == (9, 2012)

        assert education_repo.update_by_id(conn, eid, deleted=1) == 1
        assert education_repo.get_by_id(conn, eid) is None
        assert education_repo.get_all(conn) == []

        raw = conn.execute("SELECT degree, deleted FROM education WHERE id=?", (eid,)).fetchone()
        assert raw["degree"] == "BSc" and raw["deleted"] == 1


def test_get_all_newest_first():
    with get_conn() as conn:
        first = _insert(conn)
        second = _insert(conn, degree="MSc", start_date_month=9, start_date_year=2017,
                         end_date_month=None, end_date_year=None, is_current=1)
        ids = [r["id"] for r in education_repo.get_all(conn)]
        assert ids == [second, first]


def test_partial_update():
    with get_conn() as conn:
        eid = _insert(conn)
        assert education_repo.update_by_id(conn, eid, subject="Mathematics") == 1
        row = education_repo.get_by_id(conn, eid)
        assert row["subject"] == "Mathematics"
        assert row["degree"] == "BSc"
