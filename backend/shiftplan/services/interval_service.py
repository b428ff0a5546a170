"""
Interval arithmetic over a worker's blocks for one day.

- merge_blocks / effective_minutes: classic sort-and-sweep merge
- subtract_block: remove an absence from a work interval
- consolidate_day: one headline "next activity" range per day
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from shiftplan.schemas.shift import Shift, ShiftKind
from shiftplan.utils.time_utils import TimeBlock, minutes_to_time

logger = logging.getLogger(__name__)


# ── Interval merger ──────────────────────────────────────────────────────────

def merge_blocks(blocks: Iterable[TimeBlock], merge_touching: bool = True) -> list[TimeBlock]:
    """
    Merge overlapping blocks. With ``merge_touching`` a block starting exactly
    where the current span ends is merged too (09–12 + 12–15 → 09–15).
    """
    merged: list[TimeBlock] = []
    for block in sorted(blocks):
        if merged:
            current = merged[-1]
            joins = block.start <= current.end if merge_touching else block.start < current.end
            if joins:
                merged[-1] = TimeBlock(current.start, max(current.end, block.end))
                continue
        merged.append(block)
    return merged


def effective_minutes(blocks: Iterable[TimeBlock], merge_touching: bool = True) -> int:
    """Minutes covered by ``blocks``, overlaps counted once. Breaks are not subtracted."""
    return sum(span.duration for span in merge_blocks(blocks, merge_touching))


def effective_hours_by_day(shifts: Iterable[Shift], merge_touching: bool = True) -> dict[date, float]:
    """Merged work hours per date. Night shifts count fully on their start date."""
    per_day: dict[date, list[TimeBlock]] = defaultdict(list)
    for shift in shifts:
        if shift.is_absence or shift.is_cancelled:
            continue
        per_day[shift.date].append(shift.block)
    return {day: effective_minutes(blocks, merge_touching) / 60 for day, blocks in per_day.items()}


# ── Interval difference ──────────────────────────────────────────────────────

def subtract_block(block: TimeBlock, cut: TimeBlock) -> list[TimeBlock]:
    """Parts of ``block`` not covered by ``cut`` (0, 1 or 2 fragments)."""
    if cut.end <= block.start or cut.start >= block.end:
        return [block]
    if cut.start <= block.start and cut.end >= block.end:
        return []
    if cut.start <= block.start:
        return [TimeBlock(cut.end, block.end)]
    if cut.end >= block.end:
        return [TimeBlock(block.start, cut.start)]
    return [TimeBlock(block.start, cut.start), TimeBlock(cut.end, block.end)]


def subtract_all(blocks: Iterable[TimeBlock], cuts: Iterable[TimeBlock]) -> list[TimeBlock]:
    remaining = list(blocks)
    for cut in cuts:
        fragments: list[TimeBlock] = []
        for block in remaining:
            fragments.extend(subtract_block(block, cut))
        remaining = fragments
    return sorted(remaining)


# ── Next-occurrence consolidator ─────────────────────────────────────────────

@dataclass
class NextActivity:
    date: date
    start_time: str
    end_time: str
    kind: ShiftKind
    reason: str | None = None
    fragments: int = 1

    @property
    def is_absence(self) -> bool:
        return self.kind == ShiftKind.ABSENCE


def consolidate_day(day_shifts: list[Shift]) -> NextActivity | None:
    """
    Collapse one day's work and absence records into a single range.

    Work blocks are merged first, then absences are cut out; what remains is
    reported as the envelope from the earliest fragment start to the latest
    fragment end, which may contain gaps. If absences swallow all work, the first absence is
    returned instead.
    """
    records = [s for s in day_shifts if not s.is_cancelled]
    if not records:
        return None

    day = records[0].date
    work = [s for s in records if s.kind == ShiftKind.WORK]
    absences = sorted((s for s in records if s.is_absence), key=lambda s: s.block)

    fragments = subtract_all(merge_blocks(s.block for s in work), (a.block for a in absences))
    if fragments:
        return NextActivity(
            date=day,
            start_time=minutes_to_time(fragments[0].start),
            end_time=minutes_to_time(max(f.end for f in fragments)),
            kind=ShiftKind.WORK,
            fragments=len(fragments),
        )

    if absences:
        first = absences[0]
        logger.debug("Work on %s fully covered by absence %s", day, first.id)
        return NextActivity(
            date=day,
            start_time=first.start_time,
            end_time=first.end_time,
            kind=ShiftKind.ABSENCE,
            reason=first.reason,
        )
    return None


def find_next_activity(shifts: Iterable[Shift], from_date: date) -> NextActivity | None:
    """Consolidated activity of the earliest date >= ``from_date`` that has records."""
    upcoming = [s for s in shifts if s.date >= from_date and not s.is_cancelled]
    if not upcoming:
        return None
    day = min(s.date for s in upcoming)
    day_shifts = sorted((s for s in upcoming if s.date == day), key=lambda s: s.block)
    return consolidate_day(day_shifts)
