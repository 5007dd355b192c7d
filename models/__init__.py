"""
Data models package for the care schedule conflict engine.

This package exports the core pillars of the data architecture:
1. Snapshot (Schedule variants, drafts)
2. Supply (Staff, Vehicle, Room, Equipment profiles)
3. Output (ScheduleConflict, Alternative results)
"""

from .schedule import (
    BaseSchedule,
    Category,
    DayPart,
    OrgSchedule,
    OrgSubType,
    PersonType,
    Schedule,
    ScheduleDraft,
    ScheduleStatus,
    ServiceType,
    StaffSchedule,
    StaffSubType,
    UserCareSchedule,
    parse_schedule,
    parse_schedules,
)

from .resource import (
    EquipmentProfile,
    EquipmentStatus,
    EquipmentType,
    OpeningHours,
    RoomProfile,
    RoomStatus,
    RoomType,
    StaffProfile,
    VehicleProfile,
    VehicleStatus,
    VehicleType,
)

from .conflict import (
    ConflictKind,
    ScheduleConflict,
)

from .alternative import (
    Alternative,
    AlternativeRequest,
    CapacityFit,
    EquipmentAlternative,
    EquipmentAlternativeRequest,
    ResourceKind,
    RoomAlternative,
    RoomAlternativeRequest,
    StaffAlternative,
    VehicleAlternative,
)

__all__ = [
    # --- Snapshot Models ---
    "BaseSchedule",
    "Category",
    "DayPart",
    "OrgSchedule",
    "OrgSubType",
    "PersonType",
    "Schedule",
    "ScheduleDraft",
    "ScheduleStatus",
    "ServiceType",
    "StaffSchedule",
    "StaffSubType",
    "UserCareSchedule",
    "parse_schedule",
    "parse_schedules",

    # --- Resource Models ---
    "EquipmentProfile",
    "EquipmentStatus",
    "EquipmentType",
    "OpeningHours",
    "RoomProfile",
    "RoomStatus",
    "RoomType",
    "StaffProfile",
    "VehicleProfile",
    "VehicleStatus",
    "VehicleType",

    # --- Output Models ---
    "ConflictKind",
    "ScheduleConflict",
    "Alternative",
    "AlternativeRequest",
    "CapacityFit",
    "EquipmentAlternative",
    "EquipmentAlternativeRequest",
    "ResourceKind",
    "RoomAlternative",
    "RoomAlternativeRequest",
    "StaffAlternative",
    "VehicleAlternative",
]
