import json

import pytest

from errors import SchemaUnavailableError
from extract_schema import _get, extract_schema, load_schema_file, render_schema
from fakes_db import FakeConnection, FakeCursor

SCHEMA = {
    "expenses": {
        "columns": {"id": "INT", "amount": "DECIMAL", "source_id": "INT"},
        "primary_key": ["id"],
        "foreign_keys": ["source_id → payment_sources.id"],
        "sample_rows": [
            {"id": 1, "amount": 250, "source_id": 1},
            {"id": 2, "amount": 99.5, "source_id": 2},
        ],
    },
    "payment_sources": {
        "columns": {"id": "INT", "name": "VARCHAR"},
        "primary_key": ["id"],
        "foreign_keys": [],
    },
}


def test_get_handles_row_shapes():
    assert _get({"table_name": "users"}, "table_name") == "users"
    assert _get({"TABLE_NAME": "orders"}, "table_name") == "orders"
    assert _get({"some_col": "value"}, "missing_col") == "value"
    assert _get(("products",), "table_name", pos=0) == "products"
    with pytest.raises(KeyError):
        _get({"a": 1, "b": 2}, "c")


def test_extract_schema_reads_information_schema():
    cursor = FakeCursor(results=[
        [{"TABLE_NAME": "payment_sources"}],
        [{"COLUMN_NAME": "id", "DATA_TYPE": "int"}, {"COLUMN_NAME": "name", "DATA_TYPE": "varchar"}],
        [{"COLUMN_NAME": "id"}],
        [],
        [{"id": 1, "name": "Cash Wallet"}],
    ])
    conn = FakeConnection(cursor)

    schema = extract_schema("expenses_db", sample_rows=1, connection_factory=lambda: conn)

    assert schema == {
        "payment_sources": {
            "columns": {"id": "INT", "name": "VARCHAR"},
            "primary_key": ["id"],
            "foreign_keys": [],
            "sample_rows": [{"id": 1, "name": "Cash Wallet"}],
        }
    }
    assert cursor.executed[-1] == ("SELECT * FROM `payment_sources` LIMIT %s", (1,))
    assert conn.closed


def test_render_schema_includes_keys_and_samples():
    text = render_schema(SCHEMA)

    assert "Table: expenses\n  Columns: id INT, amount DECIMAL, source_id INT" in text
    assert "Foreign keys: source_id → payment_sources.id" in text
    assert "Sample rows (2):\n    rows[2]{id,amount,source_id}:\n      1,250,1\n      2,99.5,2" in text
    assert "Table: payment_sources" in text


def test_load_schema_file_json(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(SCHEMA), encoding="utf-8")
    assert load_schema_file(str(path)) == render_schema(SCHEMA)


def test_load_schema_file_text(tmp_path):
    path = tmp_path / "schema.txt"
    path.write_text("CREATE TABLE expenses (id INT);", encoding="utf-8")
    assert load_schema_file(str(path)) == "CREATE TABLE expenses (id INT);"


def test_load_schema_file_missing(tmp_path):
    with pytest.raises(SchemaUnavailableError):
        load_schema_file(str(tmp_path / "nope.json"))


def test_load_schema_file_bad_json(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaUnavailableError):
        load_schema_file(str(path))
