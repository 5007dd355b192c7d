"""
Alternative suggestion data models.

Requests describe the schedule that needs a substitute resource; results are
ranked candidates sharing one contract (Alternative) with per-kind extras.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .resource import EquipmentType, RoomType
from .schedule import Schedule


class CapacityFit(str, Enum):
    """How well a candidate's seats / units cover the requirement."""
    PERFECT = "perfect"
    SUFFICIENT = "sufficient"
    LIMITED = "limited"
    INSUFFICIENT = "insufficient"


class ResourceKind(str, Enum):
    STAFF = "staff"
    VEHICLE = "vehicle"
    ROOM = "room"
    EQUIPMENT = "equipment"


# --- Requests ---

class AlternativeRequest(BaseModel):
    """Common input for every alternative engine."""
    target_schedule: Schedule = Field(description="Schedule needing a substitute")
    required_capabilities: List[str] = Field(
        default_factory=list,
        description="Skills / features / fixed equipment; empty accepts all"
    )
    required_capacity: int = Field(default=1, ge=1, description="Seats, people or units needed")
    exclude_ids: List[str] = Field(default_factory=list, description="Resources already attached")
    max_suggestions: Optional[int] = Field(default=None, ge=1, description="Defaults per engine")


class RoomAlternativeRequest(AlternativeRequest):
    required_accessibility: List[str] = Field(default_factory=list)
    preferred_room_types: List[RoomType] = Field(default_factory=list)


class EquipmentAlternativeRequest(AlternativeRequest):
    """required_capabilities holds equipment types for this request."""
    required_skills: List[str] = Field(default_factory=list, description="Skills the operator holds")


# --- Results ---

class Alternative(BaseModel):
    """A ranked substitute resource."""
    resource_id: str
    resource_name: str
    reason: str
    priority: int = Field(description="Higher ranks first")
    busy: bool = Field(description="Already booked / occupied / in use during the window")
    warning: Optional[str] = None


class StaffAlternative(Alternative):
    skills_matched: List[str] = Field(default_factory=list)


class VehicleAlternative(Alternative):
    features_matched: List[str] = Field(default_factory=list)
    capacity_fit: CapacityFit


class RoomAlternative(Alternative):
    equipment_matched: List[str] = Field(default_factory=list)
    accessibility_matched: List[str] = Field(default_factory=list)
    capacity_fit: CapacityFit
    setup_minutes: Optional[int] = None


class EquipmentAlternative(Alternative):
    equipment_type: EquipmentType
    skill_requirements_met: bool
    available_units: int = Field(description="Total units in the pool")
    units_in_use: int = Field(description="Units booked by overlapping schedules")
    capacity_fit: CapacityFit
    location_note: str = ""
    setup_minutes: Optional[int] = None
