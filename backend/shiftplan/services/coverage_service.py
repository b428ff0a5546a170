"""
Zone coverage: distinct employees per time-band compared to the zone's
required headcount.
"""
import logging
from datetime import date, datetime
from typing import Iterable

from shiftplan.schemas.coverage import (
    CoverageOut,
    CoverageStatus,
    SlotCoverage,
    Zone,
    ZoneDayCoverage,
)
from shiftplan.schemas.shift import Shift
from shiftplan.utils.time_utils import TimeSlot, date_range, get_time_slot, slot_for_minute

logger = logging.getLogger(__name__)

ALL_SLOTS = [TimeSlot.MORNING, TimeSlot.AFTERNOON, TimeSlot.NIGHT]


def classify_coverage(assigned: int, required: int) -> CoverageStatus:
    """
    Four discrete buckets, boundary-exact.
    A band that requires nobody and has nobody counts as covered.
    """
    if assigned == required:
        return CoverageStatus.COVERED
    if assigned == 0:
        return CoverageStatus.UNCOVERED
    if assigned < required:
        return CoverageStatus.UNDERSTAFFED
    return CoverageStatus.OVERSTAFFED


def coverage_ratio(assigned: int, required: int) -> float | None:
    if required == 0:
        return None
    return assigned / required


def coverage_percentage(assigned: int, required: int) -> float:
    """Band percentage for dashboards; a band with no requirement is 100 %."""
    if required == 0:
        return 100.0
    return assigned / required * 100


def _zone_day_shifts(zone: Zone, shifts: Iterable[Shift], day: date) -> list[Shift]:
    return [
        s for s in shifts
        if s.zone_id == zone.id and s.date == day and not s.is_absence and not s.is_cancelled
    ]


def workers_by_slot(shifts: Iterable[Shift]) -> dict[TimeSlot, set[str]]:
    """Bucket by start time; a worker appears once per band however many shifts they have."""
    buckets: dict[TimeSlot, set[str]] = {slot: set() for slot in ALL_SLOTS}
    for shift in shifts:
        buckets[get_time_slot(shift.start_time)].add(shift.employee_id)
    return buckets


def requested_slots(view: str, now: datetime | None = None) -> list[TimeSlot]:
    """Day view looks at the band containing ``now``; week/month views sum all three."""
    if view == "day":
        now = now or datetime.now()
        return [slot_for_minute(now.hour * 60 + now.minute)]
    return list(ALL_SLOTS)


def zone_coverage(
    zone: Zone,
    shifts: Iterable[Shift],
    day: date,
    slots: Iterable[TimeSlot] | None = None,
) -> CoverageOut:
    slots = list(slots) if slots is not None else list(ALL_SLOTS)
    buckets = workers_by_slot(_zone_day_shifts(zone, shifts, day))

    assigned = sum(len(buckets[slot]) for slot in slots)
    required = sum(zone.required_coverage.for_slot(slot) for slot in slots)

    return CoverageOut(
        zone_id=zone.id,
        date=day,
        slots=slots,
        assigned_count=assigned,
        required_count=required,
        ratio=coverage_ratio(assigned, required),
        status=classify_coverage(assigned, required),
    )


def zone_coverage_for_view(
    zone: Zone,
    shifts: Iterable[Shift],
    day: date,
    view: str = "day",
    now: datetime | None = None,
) -> CoverageOut:
    return zone_coverage(zone, shifts, day, requested_slots(view, now))


def _slot_stats(assigned: int, required: int) -> SlotCoverage:
    return SlotCoverage(
        assigned=assigned,
        required=required,
        percentage=coverage_percentage(assigned, required),
        status=classify_coverage(assigned, required),
    )


def zone_day_coverage(zone: Zone, shifts: Iterable[Shift], day: date) -> ZoneDayCoverage:
    buckets = workers_by_slot(_zone_day_shifts(zone, shifts, day))
    req = zone.required_coverage
    per_slot = {slot: _slot_stats(len(buckets[slot]), req.for_slot(slot)) for slot in ALL_SLOTS}

    return ZoneDayCoverage(
        zone_id=zone.id,
        zone_name=zone.name,
        date=day,
        morning=per_slot[TimeSlot.MORNING],
        afternoon=per_slot[TimeSlot.AFTERNOON],
        night=per_slot[TimeSlot.NIGHT],
        overall=sum(s.percentage for s in per_slot.values()) / len(per_slot),
    )


def zone_range_coverage(
    zone: Zone, shifts: Iterable[Shift], from_date: date, to_date: date
) -> list[ZoneDayCoverage]:
    shifts = list(shifts)
    return [zone_day_coverage(zone, shifts, day) for day in date_range(from_date, to_date)]


def zone_average_coverage(
    zone: Zone, shifts: Iterable[Shift], from_date: date, to_date: date
) -> float | None:
    """Mean daily overall coverage of one zone; None for an empty range."""
    days = zone_range_coverage(zone, shifts, from_date, to_date)
    if not days:
        return None
    return sum(d.overall for d in days) / len(days)


def average_coverage(zones: Iterable[Zone], shifts: Iterable[Shift], from_date: date, to_date: date) -> float:
    """Mean of each zone's mean daily overall coverage; 0 without zones or days."""
    shifts = list(shifts)
    zone_averages = [
        avg for avg in (zone_average_coverage(z, shifts, from_date, to_date) for z in zones)
        if avg is not None
    ]
    if not zone_averages:
        return 0.0
    avg = sum(zone_averages) / len(zone_averages)
    logger.debug("Average coverage over %d zone(s): %.1f%%", len(zone_averages), avg)
    return avg
