"""
Field checks shared by the work / education services.

Each check returns a ServiceError (INVALID_PARAM) or None; validate_record
runs them in order and stops at the first failure.
"""
from __future__ import annotations

import datetime as dt
from typing import Any, Mapping, Optional, Sequence

from ..errors import ServiceError, invalid_param

MIN_YEAR = 1900


def is_blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def _is_int(v: Any) -> bool:
    # bool is an int subclass; True/False are not valid months or years
    return isinstance(v, int) and not isinstance(v, bool)


def required_message(fields: Sequence[str]) -> str:
    if len(fields) == 1:
        return f"{fields[0]} is required"
    return f"{', '.join(fields[:-1])} and {fields[-1]} are required"


def check_required(payload: Mapping[str, Any], fields: Sequence[str]) -> Optional[ServiceError]:
    if any(is_blank(payload.get(f)) for f in fields):
        return invalid_param(required_message(fields))
    return None


def check_is_current(v: Any) -> Optional[ServiceError]:
    if _is_int(v) and v in (0, 1):
        return None
    return invalid_param("is_current must be 0 or 1")


def check_month(v: Any, name: str) -> Optional[ServiceError]:
    if not _is_int(v) or v < 1 or v > 12:
        return invalid_param(f"{name} must between 1 - 12 (inclusive)")
    return None


def check_year(v: Any, name: str, current_year: int, min_year: int = MIN_YEAR) -> Optional[ServiceError]:
    if not _is_int(v) or v < min_year or v > current_year:
        return invalid_param(f"{name} must between {min_year} - {current_year} (inclusive)")
    return None


def validate_record(
    payload: Mapping[str, Any],
    required: Sequence[str],
    *,
    current_year: int | None = None,
    min_year: int = MIN_YEAR,
) -> Optional[ServiceError]:
    """
    1) required fields  2) is_current in {0,1}  3) start month  4) start year
    5) when not current: end month/year required, range-checked, end >= start
    """
    year = current_year or dt.date.today().year

    err = check_required(payload, required)
    if err:
        return err
    err = check_is_current(payload.get("is_current"))
    if err:
        return err
    err = check_month(payload.get("start_date_month"), "start_date_month")
    if err:
        return err
    err = check_year(payload.get("start_date_year"), "start_date_year", year, min_year)
    if err:
        return err

    if int(payload["is_current"]) == 0:
        end_month = payload.get("end_date_month")
        end_year = payload.get("end_date_year")
        if is_blank(end_month) or is_blank(end_year):
            return invalid_param("end_date_month and end_date_year are required if is_current is false")
        err = check_month(end_month, "end_date_month")
        if err:
            return err
        err = check_year(end_year, "end_date_year", year, min_year)
        if err:
            return err
        # 按每月 1 号比较；同年同月视为合法
        start = dt.date(payload["start_date_year"], payload["start_date_month"], 1)
        end = dt.date(end_year, end_month, 1)
        if start > end:
            return invalid_param("start_date must before end_date")
    return None


def record_fields(payload: Mapping[str, Any], text_fields: Sequence[str]) -> dict[str, Any]:
    """
    Build the column values for a validated payload: description defaults to '',
    end dates are forced to None for a current record.
    """
    is_current = int(payload["is_current"])
    out: dict[str, Any] = {f: payload[f] for f in text_fields}
    out.update(
        description=payload.get("description") or "",
        start_date_month=payload["start_date_month"],
        start_date_year=payload["start_date_year"],
        end_date_month=payload.get("end_date_month") if is_current == 0 else None,
        end_date_year=payload.get("end_date_year") if is_current == 0 else None,
        is_current=is_current,
    )
    return out
