# Natural language explanation of a query result
# This does NOT touch the database

from errors import GenerationError
from explaination_prompt import EXPLANATION_SYSTEM_PROMPT, build_explanation_prompt
from result_compaction import format_result_for_prompt


def explain_result(llm, question: str, result) -> str:
    """
    Second model call of a request: explains `result`
    (compact text or raw records) in terms of `question`.
    """
    messages = [
        {"role": "system", "content": EXPLANATION_SYSTEM_PROMPT},
        {
            "role": "user",
            "content": build_explanation_prompt(
                question=question,
                result=format_result_for_prompt(result),
            ),
        },
    ]

    try:
        explanation = llm.chat(messages)
    except GenerationError:
        raise
    except Exception as e:
        raise GenerationError(f"Explanation call failed: {e}") from e

    return (explanation or "").strip()
