"""
Shift status workflow: filter, publish, unpublish and resolve after validation.
All functions return new copies; input records are never mutated.
"""
import logging
from typing import Iterable

from shiftplan.schemas.conflict import ValidationResult
from shiftplan.schemas.publishing import PublishResult, UnpublishResult
from shiftplan.schemas.shift import Shift, ShiftFilters, ShiftStatus

logger = logging.getLogger(__name__)


def matches_filters(shift: Shift, filters: ShiftFilters) -> bool:
    if filters.cost_center_id and shift.cost_center_id != filters.cost_center_id:
        return False
    if filters.zone_id and shift.zone_id != filters.zone_id:
        return False
    if filters.role and shift.role != filters.role:
        return False
    if filters.status and shift.status != filters.status:
        return False
    if filters.employee_id and shift.employee_id != filters.employee_id:
        return False
    if filters.date_from and shift.date < filters.date_from:
        return False
    if filters.date_to and shift.date > filters.date_to:
        return False
    return True


def filter_shifts(shifts: Iterable[Shift], filters: ShiftFilters | None = None) -> list[Shift]:
    if filters is None:
        return list(shifts)
    return [s for s in shifts if matches_filters(s, filters)]


def publish_shifts(shifts: list[Shift], filters: ShiftFilters | None = None) -> PublishResult:
    """
    Publish every draft in scope. Shifts in ``conflict`` are left alone and
    reported so the planner can resolve them first.
    """
    in_scope = {s.id for s in filter_shifts(shifts, filters)}
    published: list[str] = []
    skipped: list[str] = []
    updated: list[Shift] = []

    for shift in shifts:
        if shift.id in in_scope and shift.status == ShiftStatus.DRAFT and not shift.is_absence:
            shift = shift.model_copy(update={"status": ShiftStatus.PUBLISHED})
            published.append(shift.id)
        elif shift.id in in_scope and shift.status == ShiftStatus.CONFLICT:
            skipped.append(shift.id)
        updated.append(shift)

    logger.info("Published %d shift(s), skipped %d with conflicts", len(published), len(skipped))
    return PublishResult(
        published_count=len(published),
        published_ids=published,
        skipped_conflict_ids=skipped,
        shifts=updated,
    )


def unpublish_shifts(shifts: list[Shift], shift_ids: Iterable[str]) -> UnpublishResult:
    """Return the given published shifts to draft."""
    ids = set(shift_ids)
    count = 0
    updated: list[Shift] = []
    for shift in shifts:
        if shift.id in ids and shift.status == ShiftStatus.PUBLISHED:
            shift = shift.model_copy(update={"status": ShiftStatus.DRAFT})
            count += 1
        updated.append(shift)

    logger.info("Unpublished %d shift(s)", count)
    return UnpublishResult(unpublished_count=count, shifts=updated)


def resolve_status(shift: Shift, result: ValidationResult) -> ShiftStatus:
    if shift.is_cancelled:
        return shift.status
    if result.conflicts:
        return ShiftStatus.CONFLICT
    if shift.status == ShiftStatus.CONFLICT:
        return ShiftStatus.DRAFT
    return shift.status
