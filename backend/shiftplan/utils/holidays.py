"""
Public holidays via workalendar.
The calendar is chosen by ISO code (settings.HOLIDAY_CALENDAR), e.g. "ES" or "ES-MD".
"""
from datetime import date
from functools import lru_cache

from workalendar.registry import registry

from shiftplan.core.config import settings


@lru_cache(maxsize=16)
def _calendar(code: str):
    cal_class = registry.get(code)
    if cal_class is None:
        raise ValueError(f"Unknown holiday calendar: {code!r}")
    return cal_class()


@lru_cache(maxsize=64)
def get_holidays(year: int, code: str) -> dict[date, str]:
    """All public holidays of ``year`` for calendar ``code``."""
    return {d: name for d, name in _calendar(code).holidays(year)}


def is_holiday(d: date, code: str | None = None) -> tuple[bool, str | None]:
    """Checks whether ``d`` is a public holiday. Empty code → never a holiday."""
    code = settings.HOLIDAY_CALENDAR if code is None else code
    if not code:
        return False, None
    name = get_holidays(d.year, code).get(d)
    return name is not None, name
