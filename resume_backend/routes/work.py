from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ..logs import LogContext
from ..services.work_svc import (
    create_work,
    delete_work_by_id,
    get_all_works,
    get_work_by_id,
    update_work_by_id,
)
from .base import unwrap

router = APIRouter()


# 字段全部可选且数值字段不做类型转换：必填、类型与取值范围的校验统一在 service 层完成
class WorkBody(BaseModel):
    title: Optional[str] = None
    company_name: Optional[str] = None
    description: Optional[str] = None
    start_date_month: Any = None
    start_date_year: Any = None
    end_date_month: Any = None
    end_date_year: Any = None
    is_current: Any = None


@router.get("/api/work/list")
def api_work_list():
    log = LogContext("LIST_WORK")
    items = unwrap(get_all_works(log), log, write_ok=False)
    return {"items": items}


@router.get("/api/work/{work_id}")
def api_work_get(work_id: int):
    log = LogContext("GET_WORK")
    return unwrap(get_work_by_id(work_id, log), log, write_ok=False)


@router.post("/api/work/create", status_code=201)
def api_work_create(body: WorkBody):
    log = LogContext("CREATE_WORK")
    log.set_payload(body.model_dump())
    work = unwrap(create_work(body.model_dump(), log), log)
    return {"message": "ok", "work": work}


@router.post("/api/work/update/{work_id}")
def api_work_update(work_id: int, body: WorkBody):
    log = LogContext("UPDATE_WORK")
    log.set_payload(body.model_dump())
    changed = unwrap(update_work_by_id(work_id, body.model_dump(), log), log)
    return {"message": "ok", "changed_rows": changed}


@router.post("/api/work/delete/{work_id}")
def api_work_delete(work_id: int):
    log = LogContext("DELETE_WORK")
    log.set_payload({"id": work_id})
    changed = unwrap(delete_work_by_id(work_id, log), log)
    return {"message": "ok", "changed_rows": changed}
