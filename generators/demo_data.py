"""
Demo data generator for the care schedule conflict engine.

Produces two things:
1. Fixed demo resource profiles (staff, vehicles, rooms, equipment)
2. A seeded synthetic schedule snapshot for one day, dense enough to
   contain every default conflict kind
Raw rows are validated through the pydantic models; invalid rows are
skipped with a warning.
"""

import logging
import random
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from models import (
    BaseSchedule,
    EquipmentProfile,
    RoomProfile,
    StaffProfile,
    VehicleProfile,
    parse_schedule,
)

logger = logging.getLogger(__name__)

STAFF_ROWS = [
    {"id": "301", "name": "Mao Abe", "skills": ["life-support", "transport", "counseling"],
     "roles": ["support-worker", "driver"], "work_days": [0, 1, 2, 3, 4],
     "base_shift_start": "09:00", "base_shift_end": "17:00"},
    {"id": "302", "name": "Yuma Saeki", "skills": ["life-support", "medical-care"],
     "roles": ["support-worker", "nurse"], "work_days": [0, 1, 2, 3, 4],
     "base_shift_start": "08:30", "base_shift_end": "17:30"},
    {"id": "303", "name": "Naoki Sato", "skills": ["life-support", "recreation"],
     "roles": ["support-worker"], "work_days": [0, 1, 2, 3, 4, 5],
     "base_shift_start": "10:00", "base_shift_end": "18:00"},
    {"id": "304", "name": "Aya Suzuki", "skills": ["transport", "rehabilitation", "life-support"],
     "roles": ["driver", "therapist"], "work_days": [1, 2, 3, 4, 5],
     "base_shift_start": "09:00", "base_shift_end": "17:00"},
    {"id": "305", "name": "Akira Yamada", "skills": ["management", "counseling", "life-support"],
     "roles": ["manager", "care-coordinator"], "work_days": [0, 1, 2, 3, 4],
     "base_shift_start": "08:30", "base_shift_end": "17:30"},
]

VEHICLE_ROWS = [
    {"id": "vehicle-001", "name": "Shuttle 01", "type": "welfare", "capacity": 6,
     "features": ["wheelchair-accessible", "lift", "air-conditioning"], "available_days": [0, 1, 2, 3, 4]},
    {"id": "vehicle-002", "name": "Shuttle 02", "type": "wagon", "capacity": 8,
     "features": ["wheelchair-accessible", "air-conditioning", "dashcam"], "available_days": [0, 1, 2, 3, 4, 5]},
    {"id": "vehicle-003", "name": "Emergency Car", "type": "compact", "capacity": 4,
     "features": ["air-conditioning", "emergency-kit"], "available_days": [0, 1, 2, 3, 4, 5, 6]},
    {"id": "vehicle-004", "name": "Microbus", "type": "bus", "capacity": 20,
     "features": ["wheelchair-accessible", "lift", "air-conditioning", "microphone"], "available_days": [5, 6]},
]

ROOM_ROWS = [
    {"id": "room-consultation-001", "name": "Consultation Room A", "type": "consultation", "capacity": 4,
     "area": 15, "fixed_equipment": ["desk", "chairs", "whiteboard", "privacy-curtain"],
     "available_hours": {"start": "09:00", "end": "17:00"},
     "accessibility": ["wheelchair-accessible", "handrails"], "setup_minutes": 10},
    {"id": "room-training-001", "name": "Rehabilitation Room", "type": "training", "capacity": 10,
     "area": 40, "fixed_equipment": ["parallel-bars", "step-platform", "mats", "mirror"],
     "available_hours": {"start": "08:30", "end": "18:00"},
     "accessibility": ["wheelchair-accessible", "handrails", "non-slip-floor"], "setup_minutes": 15},
    {"id": "room-recreation-001", "name": "Play Room", "type": "recreation", "capacity": 15,
     "area": 60, "fixed_equipment": ["tv", "sound-system", "shelves", "karaoke"],
     "available_hours": {"start": "09:00", "end": "21:00"},
     "accessibility": ["wheelchair-accessible", "hearing-loop"], "setup_minutes": 20},
    {"id": "room-dining-001", "name": "Dining Hall", "type": "dining", "capacity": 30,
     "area": 100, "fixed_equipment": ["tables", "chairs", "hand-wash", "serving-counter"],
     "available_hours": {"start": "06:00", "end": "20:00"},
     "accessibility": ["wheelchair-accessible", "adjustable-tables"], "setup_minutes": 30},
]

EQUIPMENT_ROWS = [
    {"id": "equipment-lift-001", "name": "Transfer Lift", "type": "mobility", "category": "transfer support",
     "available_units": 2, "required_skills": ["transfer-assist", "machine-operation"],
     "location": "Rehabilitation Room", "setup_minutes": 15},
    {"id": "equipment-wheelchair-001", "name": "Wheelchair (standard)", "type": "mobility",
     "category": "mobility support", "available_units": 8, "required_skills": [],
     "location": "Entrance Hall", "setup_minutes": 5},
    {"id": "equipment-communication-001", "name": "Communication Board", "type": "communication",
     "category": "communication support", "available_units": 3,
     "required_skills": ["communication-support"], "location": "Consultation Room", "setup_minutes": 10},
    {"id": "equipment-medical-001", "name": "Vital Signs Monitor", "type": "medical", "category": "health checks",
     "available_units": 1, "required_skills": ["nurse", "health-checks"], "location": "Sick Bay",
     "setup_minutes": 20},
    {"id": "equipment-training-001", "name": "Balance Ball", "type": "training", "category": "rehabilitation",
     "available_units": 5, "required_skills": ["rehab-instructor"], "location": "Rehabilitation Room",
     "setup_minutes": 5},
]

PERSON_ROWS = [
    ("U001", "Hana Ito"), ("U002", "Ren Kato"), ("U003", "Sora Kimura"),
    ("U004", "Mei Hayashi"), ("U005", "Kaito Mori"), ("U006", "Yui Ogawa"),
]

CARE_TITLES = ["Respite visit", "Short-stay check-in", "Outing support", "Hospital escort", "Bathing assistance"]
STAFF_TITLES = {"meeting": "Case meeting", "training": "First-aid training",
                "visitor-reception": "Visitor reception", "paid-leave": "Paid leave"}
ORG_TITLES = {"meeting": "All-hands meeting", "training": "Fire drill", "recreation": "Music afternoon",
              "external-group-use": "Community group use"}


class DemoDataGenerator:
    """
    Builds demo profiles and a synthetic snapshot. A fixed seed makes the
    snapshot reproducible.
    """

    def __init__(self, seed: Optional[int] = 42):
        self.rng = random.Random(seed)

    @staticmethod
    def _validate_rows(rows: List[Dict[str, Any]], model_class: Type[BaseModel]) -> List[Any]:
        valid_items = []
        for i, row in enumerate(rows):
            try:
                valid_items.append(model_class(**row))
            except ValidationError as e:
                logger.warning(f"Skipping invalid {model_class.__name__} row {i}: {e.errors()}")
        return valid_items

    def generate_resources(self) -> Dict[str, List]:
        return {
            "staff": self._validate_rows(STAFF_ROWS, StaffProfile),
            "vehicles": self._validate_rows(VEHICLE_ROWS, VehicleProfile),
            "rooms": self._validate_rows(ROOM_ROWS, RoomProfile),
            "equipment": self._validate_rows(EQUIPMENT_ROWS, EquipmentProfile),
        }

    def _slot(self, day: date, earliest: int = 8, latest: int = 17) -> Tuple[str, str]:
        """Random 30-minute-aligned window of 30-120 minutes, naive site-local ISO."""
        start = datetime.combine(day, time(earliest)) + timedelta(minutes=30 * self.rng.randint(0, (latest - earliest) * 2))
        end = start + timedelta(minutes=30 * self.rng.randint(1, 4))
        return start.isoformat(), end.isoformat()

    def _care_row(self, idx: int, day: date) -> Dict[str, Any]:
        person_id, person_name = self.rng.choice(PERSON_ROWS)
        start, end = self._slot(day)
        staff_ids = self.rng.sample([s["id"] for s in STAFF_ROWS], k=self.rng.randint(1, 2))
        row = {
            "id": f"user-{idx:03d}",
            "category": "User",
            "title": f"{self.rng.choice(CARE_TITLES)} ({person_name})",
            "start": start,
            "end": end,
            "service_type": self.rng.choice(["respite", "short-stay"]),
            "person_id": person_id,
            "person_name": person_name,
            "staff_ids": staff_ids,
            "status": self.rng.choice(["pending", "approved"]),
        }
        if self.rng.random() < 0.4:
            row["vehicle_id"] = self.rng.choice(VEHICLE_ROWS)["id"]
            row["primary_staff_id"] = staff_ids[0]
        if self.rng.random() < 0.3:
            row["room_id"] = self.rng.choice(ROOM_ROWS)["id"]
        if self.rng.random() < 0.2:
            row["equipment_ids"] = [self.rng.choice(EQUIPMENT_ROWS)["id"]]
        return row

    def _staff_row(self, idx: int, day: date) -> Dict[str, Any]:
        sub_type = self.rng.choice(list(STAFF_TITLES))
        start, end = self._slot(day)
        return {
            "id": f"staff-{idx:03d}",
            "category": "Staff",
            "title": STAFF_TITLES[sub_type],
            "start": start,
            "end": end,
            "sub_type": sub_type,
            "staff_ids": [self.rng.choice(STAFF_ROWS)["id"]],
        }

    def _org_row(self, idx: int, day: date) -> Dict[str, Any]:
        sub_type = self.rng.choice(list(ORG_TITLES))
        start, end = self._slot(day, earliest=9, latest=16)
        return {
            "id": f"org-{idx:03d}",
            "category": "Org",
            "title": ORG_TITLES[sub_type],
            "start": start,
            "end": end,
            "sub_type": sub_type,
            "audience": ["all-staff"],
            "resource_id": self.rng.choice(ROOM_ROWS)["id"],
        }

    def generate_snapshot(self, day: date, count: int = 30) -> List[BaseSchedule]:
        """
        Synthetic snapshot for one day: roughly 70% care visits, 20% staff
        entries and 10% org events.
        """
        rows = []
        for idx in range(count):
            roll = self.rng.random()
            if roll < 0.7:
                rows.append(self._care_row(idx, day))
            elif roll < 0.9:
                rows.append(self._staff_row(idx, day))
            else:
                rows.append(self._org_row(idx, day))

        schedules = []
        for row in rows:
            try:
                schedules.append(parse_schedule(row))
            except ValidationError as e:
                logger.warning(f"Skipping invalid schedule row {row.get('id')}: {e.errors()}")
        logger.info(f"Generated {len(schedules)} demo schedules for {day.isoformat()}")
        return schedules
