from __future__ import annotations

from resume_backend.errors import ErrorCode
from resume_backend.services.education_svc import (
    create_education,
    delete_education_by_id,
    get_all_educations,
    get_education_by_id,
    update_education_by_id,
)


def _payload(**overrides):
    p = {
        "degree": "BSc",
        "subject": "Computer Science",
        "school_name": "State University",
        "start_date_month": 9,
        "start_date_year": 2012,
        "end_date_month": 6,
        "end_date_year": 2016,
        "is_current": 0,
    }
    p.update(overrides)
    return p


def test_create_and_get(log):
    res = create_education(_payload(), log)
    assert res.ok, res.error
    edu = res.value
    assert edu["school_name"] == "State University"
    assert (edu["end_date_month"], edu["end_date_year"]) == (6, 2016)
    assert log.entity_type == "EDUCATION"

    got = get_education_by_id(edu["id"], log)
    assert got.ok and got.value["degree"] == "BSc"


def test_required_fields(log):
    res = create_education(_payload(subject=None), log)
    assert res.error.code is ErrorCode.INVALID_PARAM
    assert res.error.message == (
        "degree, subject, school_name, start_date_month, start_date_year and is_current are required"
    )


def test_current_education_drops_end_date(log):
    res = create_education(_payload(is_current=1), log)
    assert res.ok
    assert res.value["end_date_month"] is None and res.value["end_date_year"] is None


def test_not_found_messages(log):
    assert get_education_by_id(None, log).error.message == "educationId is required"
    assert get_education_by_id(42, log).error.message == "no education found"
    assert update_education_by_id(42, _payload(), log).error.message == "no education found"
    assert delete_education_by_id(42, log).error.message == "no education found"


def test_update_then_delete(log):
    eid = create_education(_payload(), log).value["id"]
    res = update_education_by_id(eid, _payload(subject="Mathematics", description="honours"), log)
    assert res.ok and res.value == 1
    assert get_education_by_id(eid, log).value["subject"] == "Mathematics"

    assert delete_education_by_id(eid, log).value == 1
    listed = get_all_educations(log)
    assert listed.ok and listed.value == []
