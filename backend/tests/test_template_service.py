"""
Tests for template_service – rotation patterns, range / employee limits and copy week.
"""
from datetime import date, timedelta

import pytest

from shiftplan.schemas.shift import ShiftFilters, ShiftStatus
from shiftplan.schemas.template import ApplyTemplateRequest, RotationTemplate, ShiftType
from shiftplan.services.template_service import (
    apply_template,
    copy_week,
    shift_times,
    validate_template_date_range,
    validate_template_employees,
)
from tests.conftest import MONDAY, make_absence, make_shift


def make_template(pattern=None, duration: float = 8) -> RotationTemplate:
    return RotationTemplate(
        id="tpl-1",
        name="Rotativo",
        pattern=pattern or [ShiftType.MORNING, ShiftType.AFTERNOON, ShiftType.NIGHT, ShiftType.OFF],
        shift_duration=duration,
    )


def make_request(days: int = 4, employees=("emp-1",), **kwargs) -> ApplyTemplateRequest:
    return ApplyTemplateRequest(
        template=kwargs.pop("template", make_template()),
        employee_ids=list(employees),
        date_from=MONDAY,
        date_to=MONDAY + timedelta(days=days - 1),
        zone_id="zone-1",
        **kwargs,
    )


# ── Times ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("shift_type, expected", [
    (ShiftType.MORNING, ("08:00", "16:00")),
    (ShiftType.AFTERNOON, ("16:00", "00:00")),
    (ShiftType.NIGHT, ("00:00", "08:00")),
    (ShiftType.SATURDAY, ("09:00", "17:00")),
])
def test_shift_times(shift_type, expected):
    assert shift_times(shift_type, 8) == expected


def test_shift_times_fractional_duration():
    assert shift_times(ShiftType.MORNING, 7.5) == ("08:00", "15:30")


# ── Apply ────────────────────────────────────────────────────────────────────

def test_apply_follows_pattern_and_skips_off():
    created = apply_template(make_request(days=4))

    assert [(s.date, s.start_time) for s in created] == [
        (MONDAY, "08:00"),
        (MONDAY + timedelta(days=1), "16:00"),
        (MONDAY + timedelta(days=2), "00:00"),
    ]
    assert all(s.status == ShiftStatus.DRAFT for s in created)
    assert created[0].role == "Rotativo - morning"
    assert created[0].zone_id == "zone-1"


def test_apply_initial_group_offsets_rotation():
    """Group 3 starts on the off day."""
    created = apply_template(make_request(days=2, initial_group=3))

    assert len(created) == 1
    assert created[0].date == MONDAY + timedelta(days=1)
    assert created[0].start_time == "08:00"


def test_apply_creates_one_shift_per_employee_and_day():
    created = apply_template(make_request(days=3, employees=("emp-1", "emp-2")))
    assert len(created) == 6
    assert len({s.id for s in created}) == 6


def test_apply_skips_public_holidays_when_asked(monkeypatch):
    monkeypatch.setattr(
        "shiftplan.services.template_service.is_holiday",
        lambda d: (d == MONDAY, "Fiesta" if d == MONDAY else None),
    )
    created = apply_template(make_request(days=2, skip_public_holidays=True))
    assert [s.date for s in created] == [MONDAY + timedelta(days=1)]


def test_date_range_limits():
    validate_template_date_range(MONDAY, MONDAY + timedelta(days=180))
    with pytest.raises(ValueError):
        validate_template_date_range(MONDAY, MONDAY + timedelta(days=181))
    with pytest.raises(ValueError):
        validate_template_date_range(MONDAY, MONDAY - timedelta(days=1))


def test_employee_limits():
    validate_template_employees(["e"] * 50)
    with pytest.raises(ValueError):
        validate_template_employees([])
    with pytest.raises(ValueError):
        validate_template_employees(["e"] * 51)


def test_apply_rejects_invalid_range():
    with pytest.raises(ValueError):
        apply_template(make_request(days=200))


# ── Copy week ────────────────────────────────────────────────────────────────

def test_copy_week_shifts_dates_and_resets_status():
    source = [
        make_shift(MONDAY, status=ShiftStatus.PUBLISHED),
        make_shift(MONDAY + timedelta(days=6), "16:00", "23:00"),
        make_shift(MONDAY + timedelta(days=7)),
        make_shift(MONDAY + timedelta(days=2), status=ShiftStatus.CANCELLED),
        make_absence(MONDAY + timedelta(days=3)),
    ]
    target = MONDAY + timedelta(days=14)

    copies = copy_week(source, MONDAY, target)

    assert [c.date for c in copies] == [target, target + timedelta(days=6)]
    assert all(c.status == ShiftStatus.DRAFT for c in copies)
    assert {c.id for c in copies}.isdisjoint({s.id for s in source})


def test_copy_week_with_filters():
    source = [make_shift(MONDAY), make_shift(MONDAY, zone_id="zone-2")]
    copies = copy_week(source, MONDAY, date(2025, 3, 17), ShiftFilters(zone_id="zone-2"))
    assert [c.zone_id for c in copies] == ["zone-2"]
