# Error kinds raised by the NL → SQL pipeline
# Each kind carries the fixed answer shown to the user when it ends a request


class NLToSQLError(Exception):
    answer = "Something went wrong while answering your question."


class EmptyGenerationError(NLToSQLError):
    answer = "The model did not produce a SQL query for this question."


class SchemaUnavailableError(NLToSQLError):
    answer = "The database schema could not be loaded, so the question cannot be answered right now."


class GenerationError(NLToSQLError):
    answer = "The language model could not be reached to answer this question."


class ExecutionError(NLToSQLError):
    answer = "The generated query could not be executed against the database."


class UnsafeQueryRejected(NLToSQLError):
    """Not a failure: the safety policy refused the generated statement."""

    answer = "The generated query was rejected because it is not a single read-only SELECT statement."

    def __init__(self, reason: str, statement: str = None):
        super().__init__(f"Unsafe query rejected ({reason})")
        self.reason = reason
        self.statement = statement
