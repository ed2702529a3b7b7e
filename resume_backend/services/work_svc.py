from __future__ import annotations

from typing import Any, Mapping

from ..errors import Result
from ..logs import LogContext
from ..repository import work_repo
from .record_svc import RecordService

REQUIRED = ("title", "company_name", "start_date_month", "start_date_year", "is_current")

_svc = RecordService(work_repo, "work", REQUIRED, text_fields=("title", "company_name"))


def get_all_works(log: LogContext) -> Result[list[dict]]:
    return _svc.get_all(log)


def get_work_by_id(work_id: Any, log: LogContext) -> Result[dict]:
    return _svc.get_by_id(work_id, log)


def create_work(work: Mapping[str, Any], log: LogContext) -> Result[dict]:
    """Validate and insert; returns the stored row (with id and timestamps)."""
    return _svc.create(work, log)


def update_work_by_id(work_id: Any, work: Mapping[str, Any], log: LogContext) -> Result[int]:
    """Full re-validation then update; returns changed row count."""
    return _svc.update_by_id(work_id, work, log)


def delete_work_by_id(work_id: Any, log: LogContext) -> Result[int]:
    return _svc.delete_by_id(work_id, log)
