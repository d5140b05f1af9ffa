# Normalizes a raw model response into exactly one ;-terminated statement
# Policy: the last statement the model produced is the authoritative one

from errors import EmptyGenerationError


def extract_statement(raw: str) -> str:
    """
    Splits the model output on ';', drops empty segments and keeps the last one.

    Earlier segments (restated sub-queries, drafts, commentary) are discarded.
    Raises EmptyGenerationError when nothing is left.
    """
    segments = [part.strip() for part in (raw or "").split(";")]
    segments = [part for part in segments if part]

    if not segments:
        raise EmptyGenerationError("Model response contained no SQL statement")

    return segments[-1] + ";"
