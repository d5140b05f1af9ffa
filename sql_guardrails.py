# SQL safety layer
# Decides whether a candidate statement is a single read-only SELECT
# This is mandatory: nothing reaches the database without passing it

import re
from typing import NamedTuple, Optional

import sqlparse
from sqlparse import tokens as T

from errors import UnsafeQueryRejected

# Matched as plain substrings, case-insensitive. A column like `created_at`
# or a literal containing "delete" is rejected too.
FORBIDDEN_KEYWORDS = (
    "insert", "update", "delete", "drop",
    "alter", "truncate", "create", "grant",
)

COMMENT_MARKERS = ("--", "/*")

_SELECT_PREFIX = re.compile(r"^select\b", flags=re.IGNORECASE)
# sqlparse reads `select(` as a function call
_SELECT_CALL = re.compile(r"^select\s*\(", flags=re.IGNORECASE)


class ValidationVerdict(NamedTuple):
    safe: bool
    reason: Optional[str] = None

    def __bool__(self):
        return self.safe


SAFE = ValidationVerdict(True)


def check_query(statement: str) -> ValidationVerdict:
    """Validate a candidate statement against the read-only policy.

    Lexical checks run first (select prefix, separators, deny-list, comments),
    then sqlparse must see exactly one SELECT statement.
    """
    sql = (statement or "").strip()
    lowered = sql.lower()

    # 1. Enforce SELECT prefix
    if not _SELECT_PREFIX.match(sql):
        return ValidationVerdict(False, "not_select")

    # 2. A ';' is only allowed as the terminator
    if ";" in lowered[:-1]:
        return ValidationVerdict(False, "multiple_statements")

    # 3. Block forbidden keywords and comments
    for keyword in FORBIDDEN_KEYWORDS:
        if keyword in lowered:
            return ValidationVerdict(False, f"forbidden_keyword:{keyword}")

    for marker in COMMENT_MARKERS:
        if marker in lowered:
            return ValidationVerdict(False, "comment")

    # 4. Tokenizer view must agree: one statement, led by the SELECT keyword
    tokenized = _SELECT_CALL.sub("SELECT (", sql, count=1)
    statements = [s for s in sqlparse.parse(tokenized) if s.value.strip()]
    first = statements[0].token_first(skip_cm=True) if len(statements) == 1 else None
    if first is None or first.ttype is not T.DML or first.normalized != "SELECT":
        return ValidationVerdict(False, "not_single_select")

    return SAFE


def is_safe_query(statement: str) -> bool:
    return check_query(statement).safe


def validate_sql(statement: str) -> str:
    """Return the statement unchanged, or raise UnsafeQueryRejected."""
    verdict = check_query(statement)
    if not verdict.safe:
        raise UnsafeQueryRejected(verdict.reason, statement=statement)
    return statement
