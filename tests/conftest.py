import pytest

from generators.demo_data import DemoDataGenerator
from models import OrgSchedule, StaffSchedule, UserCareSchedule

DAY = "2025-01-01"


def at(hhmm: str, day: str = DAY) -> str:
    """Naive site-local ISO instant on the test day."""
    return f"{day}T{hhmm}:00"


@pytest.fixture
def user_schedule():
    def _make(id, start, end, person_id="U001", staff_ids=("ST001",), **extra):
        return UserCareSchedule(
            id=id,
            title=extra.pop("title", f"Care {id}"),
            start=at(start) if len(start) == 5 else start,
            end=at(end) if len(end) == 5 else end,
            person_id=person_id,
            staff_ids=list(staff_ids),
            **extra,
        )
    return _make


@pytest.fixture
def staff_schedule():
    def _make(id, start, end, staff_ids=("ST001",), **extra):
        return StaffSchedule(
            id=id,
            title=extra.pop("title", f"Duty {id}"),
            start=at(start) if len(start) == 5 else start,
            end=at(end) if len(end) == 5 else end,
            staff_ids=list(staff_ids),
            **extra,
        )
    return _make


@pytest.fixture
def org_schedule():
    def _make(id, start, end, **extra):
        return OrgSchedule(
            id=id,
            title=extra.pop("title", f"Event {id}"),
            start=at(start) if len(start) == 5 else start,
            end=at(end) if len(end) == 5 else end,
            **extra,
        )
    return _make


@pytest.fixture
def demo_resources():
    return DemoDataGenerator(seed=1).generate_resources()


class RecordingUpdater:
    """ScheduleUpdater double that records every call."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def update(self, schedule_id, patch):
        self.calls.append((schedule_id, patch))
        if self.error is not None:
            raise self.error


@pytest.fixture
def updater():
    return RecordingUpdater()
