import pytest
from pydantic import ValidationError

from models import (
    AlternativeRequest,
    Category,
    DayPart,
    ScheduleDraft,
    StaffSchedule,
    UserCareSchedule,
    parse_schedule,
    parse_schedules,
)


def test_user_schedule_requires_staff():
    with pytest.raises(ValidationError):
        UserCareSchedule(id="u1", start="2025-01-01T09:00:00", end="2025-01-01T10:00:00",
                         person_id="U001", staff_ids=[])


def test_blank_staff_ids_are_rejected():
    with pytest.raises(ValidationError):
        UserCareSchedule(id="u1", start="2025-01-01T09:00:00", end="2025-01-01T10:00:00",
                         person_id="U001", staff_ids=["", ""])


def test_staff_ids_are_deduplicated():
    s = UserCareSchedule(id="u1", start="2025-01-01T09:00:00", end="2025-01-01T10:00:00",
                         person_id="U001", staff_ids=["ST1", "ST2", "ST1"])
    assert s.staff_ids == ["ST1", "ST2"]


def test_end_must_follow_start():
    with pytest.raises(ValidationError):
        UserCareSchedule(id="u1", start="2025-01-01T10:00:00", end="2025-01-01T10:00:00",
                         person_id="U001", staff_ids=["ST1"])


def test_all_day_entries_skip_range_check():
    s = StaffSchedule(id="s1", start="2025-01-01T00:00:00", end="2025-01-01T00:00:00",
                      all_day=True, staff_ids=["ST1"])
    assert s.all_day


def test_unparseable_instants_are_tolerated():
    s = UserCareSchedule(id="u1", start="garbage", end="2025-01-01T10:00:00",
                         person_id="U001", staff_ids=["ST1"])
    assert s.interval is None
    assert s.day_key is None
    assert s.fiscal_year is None


def test_external_person_needs_name():
    with pytest.raises(ValidationError):
        UserCareSchedule(id="u1", start="2025-01-01T09:00:00", end="2025-01-01T10:00:00",
                         person_type="external", staff_ids=["ST1"])
    s = UserCareSchedule(id="u1", start="2025-01-01T09:00:00", end="2025-01-01T10:00:00",
                         person_type="external", external_person_name="Guest", staff_ids=["ST1"])
    assert s.person_key == "Guest"
    assert s.display_name == "Guest"


def test_paid_leave_defaults_to_full_day():
    s = StaffSchedule(id="s1", start="2025-01-01T09:00:00", end="2025-01-01T18:00:00",
                      sub_type="paid-leave", staff_ids=["ST1"])
    assert s.day_part == DayPart.FULL

    morning = StaffSchedule(id="s2", start="2025-01-01T09:00:00", end="2025-01-01T12:00:00",
                            sub_type="paid-leave", day_part="am", staff_ids=["ST1"])
    assert morning.day_part == DayPart.AM


def test_day_key_uses_site_time_zone():
    # 23:30 UTC on New Year's Eve is already New Year's Day in Tokyo
    s = UserCareSchedule(id="u1", start="2024-12-31T23:30:00+00:00", end="2025-01-01T00:30:00+00:00",
                         person_id="U001", staff_ids=["ST1"])
    assert s.day_key == "2025-01-01"
    assert s.fiscal_year == "2025"


def test_parse_schedule_picks_variant_by_category():
    rows = [
        {"id": "u1", "category": "User", "start": "2025-01-01T09:00:00", "end": "2025-01-01T10:00:00",
         "person_id": "U001", "staff_ids": ["ST1"]},
        {"id": "s1", "category": "Staff", "start": "2025-01-01T09:00:00", "end": "2025-01-01T10:00:00",
         "staff_ids": ["ST1"]},
        {"id": "o1", "category": "Org", "start": "2025-01-01T09:00:00", "end": "2025-01-01T10:00:00",
         "resource_id": "room-1"},
    ]
    parsed = parse_schedules(rows)
    assert [type(s).__name__ for s in parsed] == ["UserCareSchedule", "StaffSchedule", "OrgSchedule"]
    assert parsed[2].room_ref == "room-1"


def test_parse_schedule_rejects_unknown_category():
    with pytest.raises(ValidationError):
        parse_schedule({"id": "x", "category": "Robot", "start": "2025-01-01T09:00:00",
                        "end": "2025-01-01T10:00:00"})


def test_schedules_are_frozen(user_schedule):
    s = user_schedule("u1", "09:00", "10:00")
    with pytest.raises(ValidationError):
        s.title = "changed"
    moved = s.model_copy(update={"start": "2025-01-01T11:00:00", "end": "2025-01-01T12:00:00"})
    assert moved.interval != s.interval
    assert s.start == "2025-01-01T09:00:00"


def test_involved_staff_includes_primary(user_schedule, org_schedule):
    s = user_schedule("u1", "09:00", "10:00", staff_ids=["ST1"], primary_staff_id="ST9")
    assert s.involved_staff_ids() == {"ST1", "ST9"}
    o = org_schedule("o1", "09:00", "10:00", audience=["ST2"])
    assert o.assigned_staff_ids == []
    assert o.involved_staff_ids() == {"ST2"}


def test_draft_with_blank_times_has_no_interval():
    assert ScheduleDraft(user_id="U001", start="", end="2025-01-01T10:00:00").interval is None
    assert ScheduleDraft(user_id="U001").interval is None


def test_alternative_request_accepts_raw_schedule_dict():
    request = AlternativeRequest(target_schedule={
        "id": "s1", "category": "Staff", "start": "2025-01-01T09:00:00",
        "end": "2025-01-01T10:00:00", "staff_ids": ["ST1"],
    })
    assert request.target_schedule.category == Category.STAFF
    assert request.required_capacity == 1
