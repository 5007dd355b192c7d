"""
Alternative suggestion engines (staff, vehicle, room, equipment).
"""
from .base import AlternativeEngine, Occupancy, ResourceStrategy, classify_capacity, match_requirements
from .equipment import EquipmentStrategy, suggest_equipment
from .room import RoomStrategy, suggest_rooms
from .staff import StaffStrategy, suggest_staff
from .vehicle import VehicleStrategy, suggest_vehicles

__all__ = [
    "AlternativeEngine",
    "Occupancy",
    "ResourceStrategy",
    "classify_capacity",
    "match_requirements",
    "EquipmentStrategy",
    "RoomStrategy",
    "StaffStrategy",
    "VehicleStrategy",
    "suggest_equipment",
    "suggest_rooms",
    "suggest_staff",
    "suggest_vehicles",
]
