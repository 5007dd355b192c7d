"""
Configuration settings for the conflict engine.
Values come from environment variables (optionally via a .env file).
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _int_list(raw: str):
    return [int(part) for part in raw.split(",") if part.strip()]


SCHEDULING_SETTINGS = {
    # Site time zone used for naive instants and day bucketing
    "time_zone": os.getenv("SCHEDULES_TZ", "Asia/Tokyo"),
    "time_shift_offsets": _int_list(os.getenv("TIME_SHIFT_OFFSETS", "-30,30,60")),
    "workload_warning_threshold": int(os.getenv("WORKLOAD_WARNING_THRESHOLD", "3")),
    "max_staff_suggestions": int(os.getenv("MAX_STAFF_SUGGESTIONS", "5")),
    "max_resource_suggestions": int(os.getenv("MAX_RESOURCE_SUGGESTIONS", "3")),
}

LOGGING_SETTINGS = {
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# Dashboard export target used by run_conflict_report.py
DASHBOARD_EXPORT_PATH = os.getenv("DASHBOARD_EXPORT_PATH", "dashboard_data.json")
