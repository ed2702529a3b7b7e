from __future__ import annotations

from typing import Any, Mapping

from ..errors import Result
from ..logs import LogContext
from ..repository import education_repo
from .record_svc import RecordService

REQUIRED = ("degree", "subject", "school_name", "start_date_month", "start_date_year", "is_current")

_svc = RecordService(education_repo, "education", REQUIRED, text_fields=("degree", "subject", "school_name"))


def get_all_educations(log: LogContext) -> Result[list[dict]]:
    return _svc.get_all(log)


def get_education_by_id(education_id: Any, log: LogContext) -> Result[dict]:
    return _svc.get_by_id(education_id, log)


def create_education(education: Mapping[str, Any], log: LogContext) -> Result[dict]:
    return _svc.create(education, log)


def update_education_by_id(education_id: Any, education: Mapping[str, Any], log: LogContext) -> Result[int]:
    return _svc.update_by_id(education_id, education, log)


def delete_education_by_id(education_id: Any, log: LogContext) -> Result[int]:
    return _svc.delete_by_id(education_id, log)
