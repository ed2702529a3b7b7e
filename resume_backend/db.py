from __future__ import annotations

# resume_backend/db.py
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .config import is_test_env, load_config

# 随包分发（见 pyproject.toml 的 package-data）
SCHEMA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "schema.sql")


# DB 路径解析顺序：
# 1) 环境变量 RESUME_DB_PATH（最高优先级）
# 2) config.yaml 的 test_db_path（当检测到测试环境时）
# 3) config.yaml 的 db_path（默认为项目根 resume.db）
def get_db_path() -> str:
    env_path = os.environ.get("RESUME_DB_PATH")
    cfg = load_config()

    if env_path:
        path = env_path
    elif is_test_env() and cfg.get("test_db_path"):
        path = cfg["test_db_path"]
    else:
        path = cfg["db_path"]

    # 确保目录存在
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    获取 SQLite 连接。优先使用显式传入的 db_path，否则走 get_db_path()。
    打开 foreign_keys，设置 row_factory 为 Row。
    """
    path = db_path or get_db_path()
    conn = sqlite3.connect(
        path,
        detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
        check_same_thread=False,
        isolation_level=None,
    )
    try:
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.row_factory = sqlite3.Row
        yield conn
    finally:
        conn.close()


def ensure_schema(db_path: str | None = None, schema_path: str | None = None) -> str:
    """Apply schema.sql (idempotent, CREATE ... IF NOT EXISTS). Returns the DB path used."""
    path = db_path or get_db_path()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(schema_path or SCHEMA_PATH, "r", encoding="utf-8") as f:
        ddl = f.read()
    with get_conn(path) as conn:
        conn.executescript(ddl)
        conn.commit()
    return path
