"""
Resource profile data models for the alternative suggestion engines.

This module defines the 'Supply' side that can be offered as a substitute:
1. Staff (human resources with skills)
2. Vehicles (transport with features and seats)
3. Rooms (spaces with fixed equipment and accessibility)
4. Equipment (shared devices counted in units)
"""

from datetime import date, time
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StaffProfile(BaseModel):
    """
    Staff member with skills and roles.
    """
    id: str = Field(description="Unique identifier")
    name: str = Field(min_length=1, description="Display name")
    skills: List[str] = Field(default_factory=list, description="e.g. life-support, transport, medical-care")
    roles: List[str] = Field(default_factory=list, description="e.g. support-worker, driver, nurse")
    work_days: List[int] = Field(default_factory=list, description="0=Monday, 6=Sunday")
    base_shift_start: Optional[time] = None
    base_shift_end: Optional[time] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "id": "301",
            "name": "Mao Abe",
            "skills": ["life-support", "transport", "counseling"],
            "roles": ["support-worker", "driver"],
            "work_days": [0, 1, 2, 3, 4],
            "base_shift_start": "09:00:00",
            "base_shift_end": "17:00:00"
        }
    })


class VehicleType(str, Enum):
    WAGON = "wagon"
    COMPACT = "compact"
    WELFARE = "welfare"
    BUS = "bus"


class VehicleStatus(str, Enum):
    AVAILABLE = "available"
    MAINTENANCE = "maintenance"
    OUT_OF_SERVICE = "out-of-service"


class VehicleProfile(BaseModel):
    """Transport vehicle with seating and fitted features."""
    id: str = Field(description="Unique identifier")
    name: str = Field(min_length=1)
    type: VehicleType
    capacity: int = Field(ge=1, description="Seats")
    features: List[str] = Field(default_factory=list, description="e.g. wheelchair-accessible, lift")
    available_days: List[int] = Field(default_factory=list, description="0=Monday, 6=Sunday")
    maintenance_dates: List[date] = Field(default_factory=list)
    status: VehicleStatus = Field(default=VehicleStatus.AVAILABLE)


class RoomType(str, Enum):
    CONSULTATION = "consultation"
    TRAINING = "training"
    RECREATION = "recreation"
    MEETING = "meeting"
    MEDICAL = "medical"
    DINING = "dining"
    BATHROOM = "bathroom"


class RoomStatus(str, Enum):
    AVAILABLE = "available"
    MAINTENANCE = "maintenance"
    RESERVED = "reserved"
    CLEANING = "cleaning"


class OpeningHours(BaseModel):
    """Daily window when a room may be used."""
    start: time
    end: time

    @model_validator(mode='after')
    def validate_times(self):
        if self.start >= self.end:
            raise ValueError("End time must be strictly after start time")
        return self


class RoomProfile(BaseModel):
    """Bookable space with fixed equipment and accessibility support."""
    id: str = Field(description="Unique identifier")
    name: str = Field(min_length=1)
    type: RoomType
    capacity: int = Field(ge=1, description="People the room holds")
    area: Optional[float] = Field(default=None, ge=0, description="Square metres")
    fixed_equipment: List[str] = Field(default_factory=list)
    available_hours: Optional[OpeningHours] = None
    accessibility: List[str] = Field(default_factory=list)
    status: RoomStatus = Field(default=RoomStatus.AVAILABLE)
    setup_minutes: Optional[int] = Field(default=None, ge=0, description="Cleaning / preparation time")


class EquipmentType(str, Enum):
    MEDICAL = "medical"
    TRAINING = "training"
    MOBILITY = "mobility"
    COMMUNICATION = "communication"
    RECREATION = "recreation"
    SAFETY = "safety"


class EquipmentStatus(str, Enum):
    AVAILABLE = "available"
    MAINTENANCE = "maintenance"
    IN_USE = "in-use"
    DAMAGED = "damaged"


class EquipmentProfile(BaseModel):
    """
    Shared device pool. 'available_units' is how many can be used at once.
    """
    id: str = Field(description="Unique identifier")
    name: str = Field(min_length=1)
    type: EquipmentType
    category: str = Field(default="", description="Free-form grouping, e.g. transfer support")
    available_units: int = Field(default=1, ge=0)
    required_skills: List[str] = Field(default_factory=list, description="Qualifications needed to operate it")
    location: str = Field(default="", description="Where it is stored")
    maintenance_dates: List[date] = Field(default_factory=list)
    status: EquipmentStatus = Field(default=EquipmentStatus.AVAILABLE)
    setup_minutes: Optional[int] = Field(default=None, ge=0)
