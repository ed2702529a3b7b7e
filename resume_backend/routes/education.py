from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ..logs import LogContext
from ..services.education_svc import (
    create_education,
    delete_education_by_id,
    get_all_educations,
    get_education_by_id,
    update_education_by_id,
)
from .base import unwrap

router = APIRouter()


# same contract as WorkBody: the service owns every check
class EducationBody(BaseModel):
    degree: Optional[str] = None
    subject: Optional[str] = None
    school_name: Optional[str] = None
    description: Optional[str] = None
    start_date_month: Any = None
    start_date_year: Any = None
    end_date_month: Any = None
    end_date_year: Any = None
    is_current: Any = None


@router.get("/api/education/list")
def api_education_list():
    log = LogContext("LIST_EDUCATION")
    items = unwrap(get_all_educations(log), log, write_ok=False)
    return {"items": items}


@router.get("/api/education/{education_id}")
def api_education_get(education_id: int):
    log = LogContext("GET_EDUCATION")
    return unwrap(get_education_by_id(education_id, log), log, write_ok=False)


@router.post("/api/education/create", status_code=201)
def api_education_create(body: EducationBody):
    log = LogContext("CREATE_EDUCATION")
    log.set_payload(body.model_dump())
    education = unwrap(create_education(body.model_dump(), log), log)
    return {"message": "ok", "education": education}


@router.post("/api/education/update/{education_id}")
def api_education_update(education_id: int, body: EducationBody):
    log = LogContext("UPDATE_EDUCATION")
    log.set_payload(body.model_dump())
    changed = unwrap(update_education_by_id(education_id, body.model_dump(), log), log)
    return {"message": "ok", "changed_rows": changed}


@router.post("/api/education/delete/{education_id}")
def api_education_delete(education_id: int):
    log = LogContext("DELETE_EDUCATION")
    log.set_payload({"id": education_id})
    changed = unwrap(delete_education_by_id(education_id, log), log)
    return {"message": "ok", "changed_rows": changed}
