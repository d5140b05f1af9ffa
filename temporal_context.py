# Current date/time in India Standard Time for prompt grounding
# Fixed +05:30 offset, independent of the host timezone settings

from datetime import datetime, timedelta, timezone
from typing import Callable, NamedTuple, Optional

IST = timezone(timedelta(hours=5, minutes=30), name="IST")


class TemporalContext(NamedTuple):
    now_text: str
    year: int


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_temporal_context(clock: Optional[Callable[[], datetime]] = None) -> TemporalContext:
    """
    Renders the current instant in IST.

    `clock` returns the current instant; naive values are taken as UTC.
    Call once per request, never cache the result.
    """
    now = (clock or _utc_now)()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    local = now.astimezone(IST)
    now_text = f"{local.year:04d}-{local:%m-%d %H:%M:%S} IST (UTC+05:30)"
    return TemporalContext(now_text=now_text, year=local.year)
