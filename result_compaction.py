# Compact re-encoding of query results for the explanation prompt
# Multi-row results are TOON-encoded: field names are written once in a header,
# then one delimited line per record.

import json
from datetime import date, datetime, time
from decimal import Decimal

import toon_format


def _plain_value(value):
    """Map driver types (Decimal, dates, bytes) to JSON-like values."""
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return value


def compact_result(rows):
    """
    Returns `rows` unchanged when there is at most one record,
    otherwise the TOON encoding of all records under the key "rows".
    """
    if not rows or len(rows) <= 1:
        return rows

    plain_rows = [{key: _plain_value(value) for key, value in row.items()} for row in rows]
    return toon_format.encode({"rows": plain_rows})


def format_result_for_prompt(result) -> str:
    if isinstance(result, str):
        return result
    return json.dumps(result, default=str, ensure_ascii=False)
