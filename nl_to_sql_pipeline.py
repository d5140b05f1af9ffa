# NL → SQL → Validation → Execution → Explanation pipeline
# Nothing reaches the database unless the safety validator says it is a single SELECT

import logging
from enum import Enum

import config
from errors import ExecutionError, NLToSQLError, SchemaUnavailableError, UnsafeQueryRejected
from result_compaction import compact_result
from result_explainer import explain_result
from sql_extractor import extract_statement
from sql_generator import generate_sql
from sql_guardrails import check_query
from temporal_context import get_temporal_context

logger = logging.getLogger(__name__)

NO_RESULT_ANSWER = "No matching records were found for your question."


class PipelineState(str, Enum):
    INIT = "init"
    SCHEMA_LOADED = "schema_loaded"
    GENERATED = "generated"
    EXTRACTED = "extracted"
    VALIDATED = "validated"
    EXECUTED = "executed"
    SUMMARIZED = "summarized"
    DONE = "done"
    ERROR = "error"


def _outcome(status, question, answer, stage, sql=None, row_count=None, error=None) -> dict:
    return {
        "status": status,
        "question": question,
        "answer": answer,
        "sql": sql,
        "row_count": row_count,
        "error": error,
        "stage": stage.value,
    }


class NLToSQLPipeline:
    """
    One request = one schema fetch, two model calls and at most one query.

    Collaborators:
        llm: object with `chat(messages) -> str`
        schema_provider: callable returning the schema context text
        executor: callable running a statement, returning a list of records
        clock: optional callable returning the current instant
    """

    def __init__(self, llm, schema_provider, executor, clock=None):
        self.llm = llm
        self.schema_provider = schema_provider
        self.executor = executor
        self.clock = clock

    def _load_schema(self) -> str:
        try:
            return self.schema_provider()
        except SchemaUnavailableError:
            raise
        except Exception as e:
            raise SchemaUnavailableError(f"Schema provider failed: {e}") from e

    def _execute(self, statement: str) -> list:
        try:
            return self.executor(statement)
        except NLToSQLError:
            raise
        except Exception as e:
            raise ExecutionError(f"Query execution failed: {e}") from e

    def run(self, question: str) -> dict:
        state = PipelineState.INIT
        statement = None
        row_count = None

        try:
            schema = self._load_schema()
            state = PipelineState.SCHEMA_LOADED
            logger.info("Schema loaded (%d chars)", len(schema))

            temporal = get_temporal_context(self.clock)
            raw_sql = generate_sql(self.llm, question, schema, temporal)
            state = PipelineState.GENERATED

            statement = extract_statement(raw_sql)
            state = PipelineState.EXTRACTED
            logger.info("Candidate statement: %s", statement)

            verdict = check_query(statement)
            state = PipelineState.VALIDATED
            if not verdict.safe:
                raise UnsafeQueryRejected(verdict.reason, statement=statement)

            rows = self._execute(statement)
            state = PipelineState.EXECUTED
            row_count = len(rows) if rows else 0
            logger.info("Query returned %d rows", row_count)

            if not rows:
                return _outcome("no_result", question, NO_RESULT_ANSWER, PipelineState.DONE,
                                sql=statement, row_count=0)

            answer = explain_result(self.llm, question, compact_result(rows))
            state = PipelineState.SUMMARIZED

        except UnsafeQueryRejected as e:
            logger.warning("Rejected unsafe statement (%s): %r", e.reason, statement)
            return _outcome("rejected", question, e.answer, PipelineState.DONE,
                            sql=statement, error=type(e).__name__)

        except NLToSQLError as e:
            logger.error("Request failed after state %s: %s", state.value, e)
            return _outcome("error", question, e.answer, PipelineState.ERROR,
                            sql=statement, row_count=row_count, error=type(e).__name__)

        logger.info("Request done after state %s", state.value)
        return _outcome("success", question, answer, PipelineState.DONE,
                        sql=statement, row_count=row_count)

    def answer(self, question: str) -> str:
        return self.run(question)["answer"]


def build_default_pipeline(backend: str = None, schema_file: str = None) -> NLToSQLPipeline:
    """Pipeline wired to the configured model backend and MySQL database."""
    from extract_schema import load_schema_context, load_schema_file
    from llm_client import build_llm_client
    from sql_executor import execute_sql

    schema_file = schema_file or config.schema_file()
    if schema_file:
        def schema_provider():
            return load_schema_file(schema_file)
    else:
        schema_provider = load_schema_context

    return NLToSQLPipeline(
        llm=build_llm_client(backend),
        schema_provider=schema_provider,
        executor=execute_sql,
    )


_default_pipeline = None


def run_nl_to_sql(user_query: str, pipeline: NLToSQLPipeline = None) -> dict:
    global _default_pipeline
    if pipeline is None:
        if _default_pipeline is None:
            _default_pipeline = build_default_pipeline()
        pipeline = _default_pipeline
    return pipeline.run(user_query)
