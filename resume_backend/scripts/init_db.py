"""
Create the work / education / operation_log tables in a SQLite file.

Safe to re-run: every statement in schema.sql is CREATE ... IF NOT EXISTS.

Usage:
  python -m resume_backend.scripts.init_db [--db path/to/resume.db] [--schema schema.sql]
"""
from __future__ import annotations

import argparse

from resume_backend.db import ensure_schema, get_db_path


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--db", default=None, help="SQLite file (default: RESUME_DB_PATH / config.yaml)")
    ap.add_argument("--schema", default=None, help="DDL file (default: schema.sql shipped in the package)")
    args = ap.parse_args(argv)

    path = ensure_schema(args.db or get_db_path(), args.schema)
    print({"message": "ok", "db_path": path})


if __name__ == "__main__":
    main()
