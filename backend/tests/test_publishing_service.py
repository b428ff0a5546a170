"""
Tests for publishing_service – filters, publish / unpublish and status resolution.
"""
from datetime import timedelta

from shiftplan.schemas.conflict import Conflict, ConflictType, Severity, ValidationResult
from shiftplan.schemas.shift import ShiftFilters, ShiftStatus
from shiftplan.services.publishing_service import (
    filter_shifts,
    publish_shifts,
    resolve_status,
    unpublish_shifts,
)
from tests.conftest import MONDAY, make_absence, make_shift


def test_filter_by_zone_employee_and_dates():
    shifts = [
        make_shift(MONDAY),
        make_shift(MONDAY, zone_id="zone-2"),
        make_shift(MONDAY, employee_id="emp-2"),
        make_shift(MONDAY + timedelta(days=8)),
    ]
    filters = ShiftFilters(
        zone_id="zone-1", employee_id="emp-1", date_from=MONDAY, date_to=MONDAY + timedelta(days=6)
    )
    assert filter_shifts(shifts, filters) == [shifts[0]]
    assert filter_shifts(shifts) == shifts


def test_filter_by_status_and_role():
    draft = make_shift(role="Recepción")
    published = make_shift(status=ShiftStatus.PUBLISHED, role="Recepción")
    assert filter_shifts([draft, published], ShiftFilters(status=ShiftStatus.PUBLISHED)) == [published]
    assert filter_shifts([draft, published], ShiftFilters(role="Cocina")) == []


def test_publish_only_drafts_and_skip_conflicts():
    draft = make_shift()
    conflict = make_shift(status=ShiftStatus.CONFLICT)
    published = make_shift(status=ShiftStatus.PUBLISHED)

    result = publish_shifts([draft, conflict, published])

    assert result.published_ids == [draft.id]
    assert result.published_count == 1
    assert result.skipped_conflict_ids == [conflict.id]
    statuses = {s.id: s.status for s in result.shifts}
    assert statuses[draft.id] == ShiftStatus.PUBLISHED
    assert statuses[conflict.id] == ShiftStatus.CONFLICT
    # Input records are not mutated.
    assert draft.status == ShiftStatus.DRAFT


def test_publish_respects_filters():
    in_scope = make_shift(zone_id="zone-1")
    out_of_scope = make_shift(zone_id="zone-2")

    result = publish_shifts([in_scope, out_of_scope], ShiftFilters(zone_id="zone-1"))

    assert result.published_ids == [in_scope.id]
    assert len(result.shifts) == 2


def test_absences_are_not_published():
    assert publish_shifts([make_absence()]).published_count == 0


def test_unpublish():
    published = make_shift(status=ShiftStatus.PUBLISHED)
    other = make_shift(status=ShiftStatus.PUBLISHED)

    result = unpublish_shifts([published, other], [published.id])

    assert result.unpublished_count == 1
    assert result.shifts[0].status == ShiftStatus.DRAFT
    assert result.shifts[1].status == ShiftStatus.PUBLISHED


def overlap_result() -> ValidationResult:
    return ValidationResult(conflicts=[
        Conflict(type=ConflictType.OVERLAP, severity=Severity.ERROR, message="overlap")
    ])


def test_resolve_status():
    assert resolve_status(make_shift(), overlap_result()) == ShiftStatus.CONFLICT
    assert resolve_status(make_shift(status=ShiftStatus.CONFLICT), ValidationResult()) == ShiftStatus.DRAFT
    assert resolve_status(make_shift(status=ShiftStatus.PUBLISHED), ValidationResult()) == ShiftStatus.PUBLISHED
    assert resolve_status(make_shift(status=ShiftStatus.CANCELLED), overlap_result()) == ShiftStatus.CANCELLED
