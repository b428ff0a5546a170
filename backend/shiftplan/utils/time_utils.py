"""
Date and time-of-day helpers shared by the shift services.

Time-of-day is exchanged as 24h ``HH:mm`` strings and dates as ``YYYY-MM-DD``;
internally everything is integer minutes since midnight.
"""
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

MINUTES_PER_DAY = 24 * 60

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class TimeSlot(str, Enum):
    MORNING = "morning"      # 08:00–16:00
    AFTERNOON = "afternoon"  # 16:00–00:00
    NIGHT = "night"          # 00:00–08:00


# (slot, start minute inclusive, end minute exclusive)
TIME_SLOT_BOUNDS: list[tuple[TimeSlot, int, int]] = [
    (TimeSlot.NIGHT, 0, 8 * 60),
    (TimeSlot.MORNING, 8 * 60, 16 * 60),
    (TimeSlot.AFTERNOON, 16 * 60, MINUTES_PER_DAY),
]


# ── Parsing / formatting ─────────────────────────────────────────────────────

def time_to_minutes(value: str) -> int:
    """``"08:30"`` → 510. Raises ValueError for anything that is not ``HH:mm``."""
    if not isinstance(value, str):
        raise ValueError(f"Invalid time {value!r}: expected HH:mm string")
    match = _TIME_RE.match(value)
    if match is None:
        raise ValueError(f"Invalid time {value!r}: expected HH:mm (00:00–23:59)")
    return int(match.group(1)) * 60 + int(match.group(2))


def minutes_to_time(minutes: int) -> str:
    """510 → ``"08:30"``. Values past midnight wrap (1500 → ``"01:00"``)."""
    hours = (minutes // 60) % 24
    return f"{hours:02d}:{minutes % 60:02d}"


def parse_date(value: str) -> date:
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValueError(f"Invalid date {value!r}: expected YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid date {value!r}: expected YYYY-MM-DD")


# ── Blocks and durations ─────────────────────────────────────────────────────

@dataclass(frozen=True, order=True)
class TimeBlock:
    """Half-open minute interval; ``end`` is already midnight-normalized."""
    start: int
    end: int

    def __post_init__(self):
        if self.end <= self.start:
            object.__setattr__(self, "end", self.end + MINUTES_PER_DAY)

    @classmethod
    def from_times(cls, start_time: str, end_time: str) -> "TimeBlock":
        return cls(time_to_minutes(start_time), time_to_minutes(end_time))

    @property
    def duration(self) -> int:
        return self.end - self.start


def block_bounds(day: date, block: TimeBlock) -> tuple[datetime, datetime]:
    """Absolute start/end datetimes of a block anchored at ``day``."""
    midnight = datetime.combine(day, datetime.min.time())
    return midnight + timedelta(minutes=block.start), midnight + timedelta(minutes=block.end)


def format_duration(hours: float) -> str:
    if hours % 1 == 0:
        return f"{int(hours)}h"
    return f"{hours:.1f}h"


# ── Time-bands ───────────────────────────────────────────────────────────────

def get_time_slot(start_time: str) -> TimeSlot:
    return slot_for_minute(time_to_minutes(start_time))


def slot_for_minute(minute: int) -> TimeSlot:
    minute %= MINUTES_PER_DAY
    for slot, lower, upper in TIME_SLOT_BOUNDS:
        if lower <= minute < upper:
            return slot
    raise AssertionError(f"minute {minute} outside the day")


# ── Weeks ────────────────────────────────────────────────────────────────────

def week_start(d: date) -> date:
    """Monday of the ISO week containing ``d``."""
    return d - timedelta(days=d.weekday())


def iso_week_key(d: date) -> tuple[int, int]:
    iso = d.isocalendar()
    return iso[0], iso[1]


def date_range(from_date: date, to_date: date) -> list[date]:
    days = []
    current = from_date
    while current <= to_date:
        days.append(current)
        current += timedelta(days=1)
    return days
