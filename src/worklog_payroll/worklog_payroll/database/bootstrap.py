"""Create the database and apply ``database/*.sql`` files.

Used by ``scripts/init_db.py``/``scripts/seed_db.py`` and by ``create_app`` when
``AUTO_INIT_DB``/``AUTO_SEED_DB`` are enabled.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, Mapping

from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

REQUIRED_TABLES = ("employees", "work_logs", "admin_logs", "salary_calculations")

# quoted strings are matched whole so a ';' inside them never ends a statement
_TOKEN = re.compile(r"'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\"|;|[^;'\"]+|['\"]", re.S)
_DB_DIRECTIVE = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.I)


def _factory(db_config: Mapping) -> DatabaseConnection:
    return DatabaseConnection(DBConfig.from_mapping(db_config))


def split_statements(sql: str) -> Iterator[str]:
    """Yield the statements of a SQL script, minus ``--`` comment lines."""

    body = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))
    buf: list[str] = []
    for m in _TOKEN.finditer(body):
        if m.group() == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
        else:
            buf.append(m.group())
    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: Mapping) -> None:
    factory = _factory(db_config)
    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def run_sql_file(db_config: Mapping, path: str | Path) -> int:
    """Execute every statement in ``path`` against the configured database.

    ``CREATE DATABASE``/``USE`` lines are skipped so the file works under any
    database name.
    """

    path = Path(path)
    statements = [s for s in split_statements(path.read_text(encoding="utf-8")) if not _DB_DIRECTIVE.match(s)]
    conn = _factory(db_config).connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %s (%d statements)", path.name, len(statements))
    return len(statements)


def apply_schema(db_config: Mapping, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    run_sql_file(db_config, schema_path)
    missing = missing_tables(db_config)
    if missing:
        logger.warning("Schema applied but tables are missing: %s", ", ".join(missing))


def apply_seed_sql(db_config: Mapping, *, seed_path: str | Path) -> None:
    run_sql_file(db_config, seed_path)


def list_tables(db_config: Mapping) -> list[str]:
    conn = _factory(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(str(row[0]) for row in cur.fetchall())
    finally:
        conn.close()


def missing_tables(db_config: Mapping) -> list[str]:
    present = set(list_tables(db_config))
    return [t for t in REQUIRED_TABLES if t not in present]
