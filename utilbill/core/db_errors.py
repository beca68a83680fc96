"""Integrity Error Classification

Maps driver-level integrity errors (asyncpg, psycopg, sqlite3) to a
constraint kind plus the offending column.

PostgreSQL drivers expose a SQLSTATE and the constraint name. sqlite3
exposes ``sqlite_errorname`` (Python 3.11+) but reports the column only in
the message text, so for SQLite the column is always parsed from the
message, and the kind is parsed from the message as well when
``sqlite_errorname`` is unavailable. That message parsing is the weak point
of this module: it depends on SQLite's English error wording.
"""

import enum
import re
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError


class ConstraintKind(str, enum.Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"
    CHECK = "check"


@dataclass(frozen=True)
class ConstraintViolation:
    kind: ConstraintKind
    table: Optional[str] = None
    column: Optional[str] = None
    constraint: Optional[str] = None


_PG_SQLSTATES = {
    "23505": ConstraintKind.UNIQUE,
    "23503": ConstraintKind.FOREIGN_KEY,
    "23502": ConstraintKind.NOT_NULL,
    "23514": ConstraintKind.CHECK,
}

_SQLITE_ERRORNAMES = {
    "SQLITE_CONSTRAINT_UNIQUE": ConstraintKind.UNIQUE,
    "SQLITE_CONSTRAINT_PRIMARYKEY": ConstraintKind.UNIQUE,
    "SQLITE_CONSTRAINT_FOREIGNKEY": ConstraintKind.FOREIGN_KEY,
    "SQLITE_CONSTRAINT_NOTNULL": ConstraintKind.NOT_NULL,
    "SQLITE_CONSTRAINT_CHECK": ConstraintKind.CHECK,
}

_MESSAGE_PREFIXES = (
    ("unique constraint failed", ConstraintKind.UNIQUE),
    ("foreign key constraint failed", ConstraintKind.FOREIGN_KEY),
    ("not null constraint failed", ConstraintKind.NOT_NULL),
    ("check constraint failed", ConstraintKind.CHECK),
)

# "UNIQUE constraint failed: payments.bill_id"
_SQLITE_COLUMN_RE = re.compile(r"constraint failed:\s*(\w+)\.(\w+)", re.IGNORECASE)


def _sqlstate(orig: BaseException) -> Optional[str]:
    for candidate in (orig, orig.__cause__):
        if candidate is None:
            continue
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code:
            return str(code)
    return None


def _pg_detail(orig: BaseException, attr: str) -> Optional[str]:
    # asyncpg puts constraint details on the wrapped exception, psycopg on .diag
    for candidate in (orig.__cause__, orig, getattr(orig, "diag", None)):
        if candidate is None:
            continue
        value = getattr(candidate, attr, None)
        if value:
            return str(value)
    return None


def _column_from_constraint(constraint: Optional[str], table: Optional[str]) -> Optional[str]:
    # Only "uq_<table>_<column>" names are unambiguous; see NAMING_CONVENTION
    if not constraint or not table:
        return None
    prefix = f"uq_{table}_"
    if constraint.startswith(prefix):
        return constraint[len(prefix):]
    return None


def _classify_postgres(orig: BaseException, kind: ConstraintKind) -> ConstraintViolation:
    table = _pg_detail(orig, "table_name")
    constraint = _pg_detail(orig, "constraint_name")
    column = _pg_detail(orig, "column_name") or _column_from_constraint(constraint, table)
    return ConstraintViolation(kind=kind, table=table, column=column, constraint=constraint)


def _classify_sqlite(orig: BaseException) -> Optional[ConstraintViolation]:
    message = str(orig)
    errorname = getattr(orig, "sqlite_errorname", None) or getattr(orig.__cause__, "sqlite_errorname", None)
    kind = _SQLITE_ERRORNAMES.get(errorname or "")
    if kind is None:
        lowered = message.lower()
        for prefix, candidate in _MESSAGE_PREFIXES:
            if prefix in lowered:
                kind = candidate
                break
    if kind is None:
        return None

    table = column = None
    match = _SQLITE_COLUMN_RE.search(message)
    if match:
        table, column = match.group(1), match.group(2)
    constraint = f"{table}.{column}" if table else None
    return ConstraintViolation(kind=kind, table=table, column=column, constraint=constraint)


def classify_integrity_error(exc: IntegrityError) -> Optional[ConstraintViolation]:
    """
    Classify a SQLAlchemy IntegrityError.

    Returns None when the error cannot be attributed to a known constraint kind.
    """
    orig = exc.orig if exc.orig is not None else exc

    sqlstate = _sqlstate(orig)
    if sqlstate is not None:
        kind = _PG_SQLSTATES.get(sqlstate)
        return _classify_postgres(orig, kind) if kind else None

    return _classify_sqlite(orig)
