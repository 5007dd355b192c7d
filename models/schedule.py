"""
Schedule data models for the care schedule conflict engine.

This module defines the snapshot records the engine consumes:
1. UserCareSchedule (person care visits)
2. StaffSchedule (staff duty / leave entries)
3. OrgSchedule (organization-wide events)
All three share BaseSchedule and are discriminated by `category`.
"""

from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Annotated, Iterable, List, Literal, Optional, Set, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, computed_field, field_validator, model_validator

from .timing import fiscal_year_of, local_day_key, parse_instant


class Category(str, Enum):
    """Top-level schedule categories."""
    USER = "User"
    STAFF = "Staff"
    ORG = "Org"


class ScheduleStatus(str, Enum):
    """Approval lifecycle of a schedule entry."""
    DRAFT = "draft"
    PENDING = "pending"
    APPROVED = "approved"
    DONE = "done"


class ServiceType(str, Enum):
    """Care services offered for User schedules."""
    RESPITE = "respite"
    SHORT_STAY = "short-stay"


class PersonType(str, Enum):
    """Master-backed person vs. ad-hoc external person."""
    INTERNAL = "internal"
    EXTERNAL = "external"


class OrgSubType(str, Enum):
    MEETING = "meeting"
    TRAINING = "training"
    AUDIT = "audit"
    RECREATION = "recreation"
    EXTERNAL_GROUP_USE = "external-group-use"


class StaffSubType(str, Enum):
    MEETING = "meeting"
    TRAINING = "training"
    VISITOR_RECEPTION = "visitor-reception"
    PAID_LEAVE = "paid-leave"


class DayPart(str, Enum):
    """Portion of the day taken by a paid-leave entry."""
    FULL = "full"
    AM = "am"
    PM = "pm"


@lru_cache(maxsize=16384)
def _interval(start: str, end: str) -> Optional[Tuple[datetime, datetime]]:
    start_at = parse_instant(start)
    end_at = parse_instant(end)
    if start_at is None or end_at is None:
        return None
    return start_at, end_at


def _unique(values: List[str]) -> List[str]:
    """Drop blanks and duplicates while keeping the first-seen order."""
    seen = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return seen


class BaseSchedule(BaseModel):
    """
    Fields shared by every schedule category.
    Instances are immutable; use model_copy(update=...) to derive a changed copy.
    """
    model_config = ConfigDict(frozen=True)

    # --- Identity ---
    id: str = Field(min_length=1, description="Unique identifier")
    concurrency_token: str = Field(default="", description="Opaque token for optimistic-concurrency writes")
    category: Category = Field(description="Discriminator tag")
    title: str = Field(default="", description="Display title")

    # --- Timing ---
    start: str = Field(description="ISO-8601 start instant")
    end: str = Field(description="ISO-8601 end instant (exclusive)")
    all_day: bool = Field(default=False)
    status: ScheduleStatus = Field(default=ScheduleStatus.DRAFT)

    # --- Free text ---
    location: Optional[str] = None
    notes: Optional[str] = None
    recurrence_rule: Optional[str] = Field(default=None, description="RFC 5545 RRULE, may be empty")

    # --- Resource references ---
    vehicle_id: Optional[str] = Field(default=None, description="Vehicle used for transport")
    room_id: Optional[str] = Field(default=None, description="Room booked for this entry")
    equipment_ids: List[str] = Field(default_factory=list, description="Equipment booked for this entry")
    primary_staff_id: Optional[str] = Field(default=None, description="Lead staff / driver for this entry")

    @field_validator("equipment_ids")
    @classmethod
    def dedupe_equipment(cls, v):
        return _unique(v)

    @model_validator(mode="after")
    def validate_time_range(self):
        """End must come after start unless the entry is all-day."""
        if self.all_day:
            return self
        interval = _interval(self.start, self.end)
        # Unparseable legacy instants are tolerated; the overlap predicate fails safe on them
        if interval is not None and interval[1] <= interval[0]:
            raise ValueError(f"Schedule {self.id}: end must be after start")
        return self

    @property
    def interval(self) -> Optional[Tuple[datetime, datetime]]:
        """Parsed (start, end) in UTC, or None when either instant is malformed."""
        return _interval(self.start, self.end)

    @computed_field
    @property
    def day_key(self) -> Optional[str]:
        return local_day_key(self.start)

    @computed_field
    @property
    def fiscal_year(self) -> Optional[str]:
        return fiscal_year_of(self.start)

    @property
    def room_ref(self) -> Optional[str]:
        return self.room_id

    @property
    def assigned_staff_ids(self) -> List[str]:
        """Staff explicitly assigned through staff_ids (empty for Org). Overridden by each category."""
        raise NotImplementedError(f"assigned_staff_ids not defined for category {self.category!r}")

    def involved_staff_ids(self) -> Set[str]:
        """Every staff member whose time this schedule consumes. Overridden by each category."""
        raise NotImplementedError(f"involved_staff_ids not defined for category {self.category!r}")


class UserCareSchedule(BaseSchedule):
    """A care visit for an internal (master-backed) or external person."""
    category: Literal["User"] = "User"
    service_type: ServiceType = Field(default=ServiceType.RESPITE)

    # Person identity (branch by person_type)
    person_type: PersonType = Field(default=PersonType.INTERNAL)
    person_id: Optional[str] = None
    person_name: Optional[str] = None
    external_person_name: Optional[str] = None
    external_person_org: Optional[str] = None
    external_person_contact: Optional[str] = None

    # Assignment
    staff_ids: List[str] = Field(min_length=1, description="Assigned staff (at least one)")
    staff_names: Optional[List[str]] = None

    @field_validator("staff_ids")
    @classmethod
    def dedupe_staff(cls, v):
        v = _unique(v)
        if not v:
            raise ValueError("UserCare schedules require at least one assigned staff id")
        return v

    @model_validator(mode="after")
    def validate_person(self):
        if self.person_type == PersonType.EXTERNAL and not (self.external_person_name or "").strip():
            raise ValueError("External UserCare schedules require external_person_name")
        return self

    @property
    def person_key(self) -> Optional[str]:
        """Identity used to compare two care visits."""
        if self.person_type == PersonType.EXTERNAL:
            return self.external_person_name
        return self.person_id

    @property
    def display_name(self) -> str:
        if self.person_type == PersonType.INTERNAL:
            return self.person_name or ""
        return self.external_person_name or ""

    @property
    def assigned_staff_ids(self) -> List[str]:
        return self.staff_ids

    def involved_staff_ids(self) -> Set[str]:
        staff = set(self.staff_ids)
        if self.primary_staff_id:
            staff.add(self.primary_staff_id)
        return staff


class StaffSchedule(BaseSchedule):
    """A staff member's own duty, training or leave entry."""
    category: Literal["Staff"] = "Staff"
    sub_type: StaffSubType = Field(default=StaffSubType.MEETING)
    staff_ids: List[str] = Field(default_factory=list, description="Owner(s) of the entry")
    staff_names: Optional[List[str]] = None
    day_part: Optional[DayPart] = Field(default=None, description="Only meaningful for paid-leave")

    @model_validator(mode="before")
    @classmethod
    def default_day_part(cls, data):
        if isinstance(data, dict):
            sub_type = data.get("sub_type")
            if sub_type in (StaffSubType.PAID_LEAVE, StaffSubType.PAID_LEAVE.value) and not data.get("day_part"):
                data = {**data, "day_part": DayPart.FULL}
        return data

    @field_validator("staff_ids")
    @classmethod
    def dedupe_staff(cls, v):
        return _unique(v)

    @property
    def assigned_staff_ids(self) -> List[str]:
        return self.staff_ids

    def involved_staff_ids(self) -> Set[str]:
        staff = set(self.staff_ids)
        if self.primary_staff_id:
            staff.add(self.primary_staff_id)
        return staff


class OrgSchedule(BaseSchedule):
    """An organization-wide event (meeting, audit, external group use...)."""
    category: Literal["Org"] = "Org"
    sub_type: OrgSubType = Field(default=OrgSubType.MEETING)
    audience: List[str] = Field(default_factory=list, description="Audience groups or staff ids")
    resource_id: Optional[str] = Field(default=None, description="Shared org resource, e.g. a play room")
    external_org_name: Optional[str] = None

    @property
    def room_ref(self) -> Optional[str]:
        return self.room_id or self.resource_id

    @property
    def assigned_staff_ids(self) -> List[str]:
        return []

    def involved_staff_ids(self) -> Set[str]:
        staff = set(self.audience)
        if self.primary_staff_id:
            staff.add(self.primary_staff_id)
        return staff


Schedule = Annotated[
    Union[UserCareSchedule, StaffSchedule, OrgSchedule],
    Field(discriminator="category"),
]

_schedule_adapter = TypeAdapter(Schedule)
_schedule_list_adapter = TypeAdapter(List[Schedule])


def parse_schedule(data: dict) -> BaseSchedule:
    """Validate a raw record into the variant named by its `category`."""
    return _schedule_adapter.validate_python(data)


def parse_schedules(rows: Iterable[dict]) -> List[BaseSchedule]:
    return _schedule_list_adapter.validate_python(list(rows))


class ScheduleDraft(BaseModel):
    """
    Unsaved form state checked while an operator creates or edits a schedule.
    start/end may still be blank.
    """
    id: Optional[str] = Field(default=None, description="Set when editing an existing schedule")
    user_id: str = Field(default="", description="Identity being scheduled (person or staff id)")
    title: Optional[str] = None
    start: str = Field(default="")
    end: str = Field(default="")
    staff_ids: List[str] = Field(default_factory=list)
    category: Optional[Category] = None

    @field_validator("staff_ids")
    @classmethod
    def dedupe_staff(cls, v):
        return _unique(v)

    @property
    def interval(self) -> Optional[Tuple[datetime, datetime]]:
        if not self.start or not self.end:
            return None
        return _interval(self.start, self.end)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "user_id": "U001",
            "title": "Respite visit",
            "start": "2025-01-01T09:30:00",
            "end": "2025-01-01T10:30:00",
            "staff_ids": ["ST001"],
        }
    })
