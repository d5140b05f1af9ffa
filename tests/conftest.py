from datetime import datetime, timezone

import pytest

from nl_to_sql_pipeline import NLToSQLPipeline

SCHEMA_TEXT = "Table: expenses\n  Columns: id INT, amount DECIMAL, date DATE, tag VARCHAR"


class FakeLLM:
    """Returns queued responses in order and records every message list."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def chat(self, messages):
        self.calls.append(messages)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeExecutor:
    def __init__(self, rows=None, error=None):
        self.rows = rows if rows is not None else []
        self.error = error
        self.statements = []

    def __call__(self, statement):
        self.statements.append(statement)
        if self.error:
            raise self.error
        return self.rows


def fixed_clock():
    return datetime(2025, 11, 14, 20, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_pipeline():
    def _make(llm, executor=None, schema_provider=None):
        return NLToSQLPipeline(
            llm=llm,
            schema_provider=schema_provider or (lambda: SCHEMA_TEXT),
            executor=executor if executor is not None else FakeExecutor(),
            clock=fixed_clock,
        )
    return _make
