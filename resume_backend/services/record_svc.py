"""
通用的单表记录服务：校验 -> 调用 repository -> 包装为 Result。
work_svc / education_svc 各自实例化一份，只是表、必填字段和文案不同。
"""
from __future__ import annotations

import logging
import sqlite3
from types import ModuleType
from typing import Any, Mapping, Optional, Sequence

from ..config import ConfigError, load_config
from ..db import get_conn
from ..errors import ErrorCode, Result, ServiceError, database_error, invalid_param
from ..logs import LogContext
from .validation import record_fields, validate_record

logger = logging.getLogger(__name__)


# 取连接（路径解析、建目录、读配置）与执行 SQL 的失败都归为 DATABASE_ERROR
STORAGE_ERRORS = (sqlite3.Error, OSError, ConfigError)


class RecordService:
    def __init__(
        self,
        repo: ModuleType,
        name: str,
        required: Sequence[str],
        text_fields: Sequence[str],
        min_year: int | None = None,
    ):
        self.repo = repo
        self.name = name                  # "work" / "education"
        self.entity_type = name.upper()   # operation_log.entity_type
        self.required = tuple(required)
        self.text_fields = tuple(text_fields)
        self._min_year = min_year

    @property
    def min_year(self) -> int:
        if self._min_year is None:
            return load_config()["min_year"]
        return self._min_year

    def _db_failure(self, log: LogContext, message: str, exc: Exception) -> Result:
        log.error(f"{message}: {exc}")
        return Result.failure(message, ErrorCode.DATABASE_ERROR)

    def _fetch_existing(self, record_id: Any, log: LogContext) -> Result[dict]:
        try:
            with get_conn() as conn:
                row = self.repo.get_by_id(conn, record_id)
        except STORAGE_ERRORS as e:
            return self._db_failure(log, f"cannot get {self.name} by id from database", e)
        # 不存在与 id 非法同样视为参数错误
        if row is None or row["id"] is None:
            return Result.from_error(invalid_param(f"no {self.name} found"))
        return Result.success(dict(row))

    def _validate(self, payload: Mapping[str, Any], log: LogContext) -> Optional[ServiceError]:
        try:
            min_year = self.min_year
        except ConfigError as e:
            log.error(f"cannot read configuration: {e}")
            return database_error("cannot read configuration")
        return validate_record(payload, self.required, min_year=min_year)

    def get_all(self, log: LogContext) -> Result[list[dict]]:
        try:
            with get_conn() as conn:
                rows = self.repo.get_all(conn)
        except STORAGE_ERRORS as e:
            return self._db_failure(log, f"cannot get all {self.name}s from database", e)
        return Result.success([dict(r) for r in rows])

    def get_by_id(self, record_id: Any, log: LogContext) -> Result[dict]:
        if not record_id:
            return Result.from_error(invalid_param(f"{self.name}Id is required"))
        return self._fetch_existing(record_id, log)

    def create(self, payload: Mapping[str, Any], log: LogContext) -> Result[dict]:
        err = self._validate(payload, log)
        if err:
            return Result.from_error(err)

        fields = record_fields(payload, self.text_fields)
        try:
            with get_conn() as conn:
                new_id = self.repo.create(conn, **fields)
                conn.commit()
                created = dict(self.repo.get_by_id(conn, new_id))
        except STORAGE_ERRORS as e:
            return self._db_failure(log, f"cannot create {self.name} from database", e)

        log.set_entity(self.entity_type, new_id)
        log.set_after(created)
        logger.info("created %s id=%s", self.name, new_id)
        return Result.success(created)

    def update_by_id(self, record_id: Any, payload: Mapping[str, Any], log: LogContext) -> Result[int]:
        if not record_id:
            return Result.from_error(invalid_param("id is required"))
        err = self._validate(payload, log)
        if err:
            return Result.from_error(err)

        existing = self._fetch_existing(record_id, log)
        if not existing.ok:
            return Result.from_error(existing.error)

        fields = record_fields(payload, self.text_fields)
        try:
            with get_conn() as conn:
                changed = self.repo.update_by_id(conn, record_id, **fields)
                conn.commit()
        except STORAGE_ERRORS as e:
            return self._db_failure(log, f"cannot update {self.name} from database", e)

        log.set_entity(self.entity_type, record_id)
        log.set_before(existing.value)
        log.set_after({"id": existing.value["id"], **fields})
        return Result.success(changed)

    def delete_by_id(self, record_id: Any, log: LogContext) -> Result[int]:
        if not record_id:
            return Result.from_error(invalid_param("id is required"))

        existing = self._fetch_existing(record_id, log)
        if not existing.ok:
            return Result.from_error(existing.error)

        # 软删除：只翻转 deleted，其余字段保持不变
        try:
            with get_conn() as conn:
                changed = self.repo.update_by_id(conn, record_id, deleted=1)
                conn.commit()
        except STORAGE_ERRORS as e:
            return self._db_failure(log, f"cannot update {self.name} from database", e)

        log.set_entity(self.entity_type, record_id)
        log.set_before(existing.value)
        log.set_after({"id": existing.value["id"], "deleted": 1})
        return Result.success(changed)
