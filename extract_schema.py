import json
import logging

import config
from db import get_connection
from errors import SchemaUnavailableError
from result_compaction import compact_result, format_result_for_prompt

logger = logging.getLogger(__name__)


def _get(row, key, pos=0):
    """Safely extract a column from a DB row.

    Supports dictionary rows with different key casings (e.g. TABLE_NAME) and
    tuple/list rows (by position). If the row contains a single value, that
    value is returned regardless of key.
    """
    if isinstance(row, dict):
        if key in row:
            return row[key]
        k_lower = key.lower()
        for k, v in row.items():
            if k.lower() == k_lower:
                return v
        if len(row) == 1:
            return next(iter(row.values()))
        raise KeyError(f"Column '{key}' not found in DB row. Available columns: {list(row.keys())}")
    try:
        return row[pos]
    except (IndexError, TypeError) as e:
        raise KeyError(f"Cannot extract '{key}' from row of type {type(row)}: {row}") from e


def _quote_identifier(name: str) -> str:
    return "`" + str(name).replace("`", "``") + "`"


def extract_schema(database_name: str = None, sample_rows: int = 0, connection_factory=get_connection) -> dict:
    """Read tables, columns and keys from information_schema.

    With `sample_rows` > 0 each table also gets a "sample_rows" list.
    """
    database_name = database_name or config.db_config()["database"]
    conn = connection_factory()
    cursor = conn.cursor(dictionary=True)

    schema = {}
    try:
        # -------------------------------
        # 1. Get all tables
        # -------------------------------
        cursor.execute("""
            SELECT table_name
            FROM information_schema.tables
            WHERE table_schema = %s
        """, (database_name,))

        tables = [_get(row, "table_name") for row in cursor.fetchall()]

        for table in tables:
            schema[table] = {
                "columns": {},
                "primary_key": [],
                "foreign_keys": []
            }

            # -------------------------------
            # 2. Columns + data types
            # -------------------------------
            cursor.execute("""
                SELECT column_name, data_type
                FROM information_schema.columns
                WHERE table_schema = %s AND table_name = %s
                ORDER BY ordinal_position
            """, (database_name, table))

            for row in cursor.fetchall():
                schema[table]["columns"][_get(row, "column_name")] = str(_get(row, "data_type", 1)).upper()

            # -------------------------------
            # 3. Primary keys
            # -------------------------------
            cursor.execute("""
                SELECT column_name
                FROM information_schema.key_column_usage
                WHERE table_schema = %s
                  AND table_name = %s
                  AND constraint_name = 'PRIMARY'
            """, (database_name, table))

            schema[table]["primary_key"] = [
                _get(row, "column_name") for row in cursor.fetchall()
            ]

            # -------------------------------
            # 4. Foreign keys
            # -------------------------------
            cursor.execute("""
                SELECT
                    column_name,
                    referenced_table_name,
                    referenced_column_name
                FROM information_schema.key_column_usage
                WHERE table_schema = %s
                  AND table_name = %s
                  AND referenced_table_name IS NOT NULL
            """, (database_name, table))

            for row in cursor.fetchall():
                col = _get(row, "column_name")
                ref_table = _get(row, "referenced_table_name", 1)
                ref_col = _get(row, "referenced_column_name", 2)
                schema[table]["foreign_keys"].append(f"{col} → {ref_table}.{ref_col}")

            # -------------------------------
            # 5. Sample rows
            # -------------------------------
            if sample_rows > 0:
                cursor.execute(
                    f"SELECT * FROM {_quote_identifier(table)} LIMIT %s", (sample_rows,)
                )
                schema[table]["sample_rows"] = cursor.fetchall()
    finally:
        cursor.close()
        conn.close()

    return schema


def render_schema(schema: dict) -> str:
    """Text form of an extracted schema, used as prompt context."""
    blocks = []
    for table, info in schema.items():
        lines = [f"Table: {table}"]
        columns = ", ".join(f"{col} {dtype}" for col, dtype in info.get("columns", {}).items())
        lines.append(f"  Columns: {columns}")
        if info.get("primary_key"):
            lines.append(f"  Primary key: {', '.join(info['primary_key'])}")
        if info.get("foreign_keys"):
            lines.append(f"  Foreign keys: {', '.join(info['foreign_keys'])}")
        samples = info.get("sample_rows")
        if samples:
            lines.append(f"  Sample rows ({len(samples)}):")
            encoded = format_result_for_prompt(compact_result(samples))
            lines.extend("    " + line for line in encoded.splitlines())
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def load_schema_context(database_name: str = None, sample_rows: int = None) -> str:
    if sample_rows is None:
        sample_rows = config.schema_sample_rows()
    try:
        schema = extract_schema(database_name, sample_rows=sample_rows)
    except Exception as e:
        raise SchemaUnavailableError(f"Schema extraction failed: {e}") from e

    if not schema:
        raise SchemaUnavailableError(f"No tables found in database {database_name!r}")
    return render_schema(schema)


def load_schema_file(path: str) -> str:
    """SchemaContext from a saved schema JSON (see __main__) or a plain text file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise SchemaUnavailableError(f"Failed to load schema from {path}: {e}") from e

    if path.endswith(".json"):
        try:
            return render_schema(json.loads(content))
        except (ValueError, AttributeError) as e:
            raise SchemaUnavailableError(f"Invalid schema JSON in {path}: {e}") from e

    if not content.strip():
        raise SchemaUnavailableError(f"Schema file {path} is empty")
    return content


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Extract DB schema (with sample rows) to a JSON file")
    parser.add_argument("--database", default=None, help="Database name to extract from")
    parser.add_argument("--sample-rows", type=int, default=None, help="Sample rows per table")
    parser.add_argument("--output", default="schema.json", help="Where to write the schema")
    args = parser.parse_args()

    config.setup_logging()
    sample_rows = config.schema_sample_rows() if args.sample_rows is None else args.sample_rows
    schema_json = extract_schema(args.database, sample_rows=sample_rows)

    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(schema_json, f, indent=2, default=str)

    print(f"✅ Schema extracted and saved to {args.output}")
