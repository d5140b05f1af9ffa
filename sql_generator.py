# NL → SQL generation call
# The raw response is returned untouched; extraction and validation happen later

import logging

from errors import GenerationError
from prompt_templates import SQL_SYSTEM_PROMPT, build_user_prompt
from temporal_context import TemporalContext

logger = logging.getLogger(__name__)


def generate_sql(llm, question: str, schema: str, temporal: TemporalContext) -> str:
    """Ask the model for a SQL query answering `question`.

    `llm` is any client exposing `chat(messages) -> str`.
    """
    messages = [
        {"role": "system", "content": SQL_SYSTEM_PROMPT},
        {
            "role": "user",
            "content": build_user_prompt(
                schema=schema,
                question=question,
                current_date_ist=temporal.now_text,
                current_year=temporal.year,
            ),
        },
    ]

    try:
        response = llm.chat(messages)
    except GenerationError:
        raise
    except Exception as e:
        raise GenerationError(f"SQL generation call failed: {e}") from e

    logger.debug("Raw model SQL: %r", response)
    return response or ""
