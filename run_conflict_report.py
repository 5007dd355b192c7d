"""
Main execution script for the care schedule conflict engine.
Builds a demo day, detects conflicts, proposes remedies for the worst
offender, and exports the dashboard JSON.
"""

import json
import logging
import os
import sys
from datetime import date
from typing import Dict, List

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config.settings import DASHBOARD_EXPORT_PATH, LOGGING_SETTINGS
from conflict_engine import (
    ALL_CONFLICT_RULES,
    build_conflict_index,
    daily_conflict_summary,
    detect_conflicts,
    kind_label,
    propose_time_shifts,
    staff_load_summary,
    suggest_staff,
    to_guide_item,
    vehicle_usage_summary,
)
from generators.demo_data import DemoDataGenerator
from models import AlternativeRequest, BaseSchedule, ScheduleConflict

# Configure logging
logging.basicConfig(
    level=LOGGING_SETTINGS["log_level"],
    format=LOGGING_SETTINGS["log_format"],
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("Main")


def export_dashboard_data(
    day: date,
    schedules: List[BaseSchedule],
    conflicts: List[ScheduleConflict],
    filename: str = DASHBOARD_EXPORT_PATH,
):
    """
    Serializes the day's snapshot and conflict rollups into a JSON format for the frontend.
    """
    logger.info(f"Exporting dashboard data to {filename}...")
    index = build_conflict_index(conflicts)
    summary = daily_conflict_summary(day, conflicts, schedules)

    data = {
        "date": summary.date,
        "schedules": [s.model_dump(mode="json") for s in schedules],
        "conflicts": [
            {**c.to_dict(), "label": kind_label(c.kind)} for c in conflicts
        ],
        "conflicts_by_schedule": {sid: len(items) for sid, items in index.items()},
        "summary": {
            "total_conflicts": summary.total_conflicts,
            "counts_by_kind": summary.counts_by_kind,
            "safety_score": summary.safety_score,
            "safety_level": summary.safety_level,
        },
        "staff_load": [vars(load) for load in staff_load_summary(day, schedules)],
        "vehicle_usage": [vars(usage) for usage in vehicle_usage_summary(day, schedules)],
    }

    with open(filename, "w") as f:
        json.dump(data, f, indent=2)
    logger.info("Dashboard data exported.")


def report_worst_schedule(schedules: List[BaseSchedule], conflicts: List[ScheduleConflict], resources: Dict[str, List]):
    """Log guidance and remedies for the schedule with the most conflicts."""
    index = build_conflict_index(conflicts)
    if not index:
        return
    worst_id = max(index, key=lambda sid: (len(index[sid]), sid))
    target = next(s for s in schedules if s.id == worst_id)
    logger.info(f"Most conflicted: '{target.title}' ({worst_id}) with {len(index[worst_id])} conflicts")

    for conflict in index[worst_id]:
        guide = to_guide_item(conflict)
        logger.info(f"  [{kind_label(conflict.kind)}] {guide.title}: {conflict.message}")

    for action in propose_time_shifts(target):
        logger.info(f"  Time shift option: {action.label} -> {action.new_start} / {action.new_end}")

    if target.assigned_staff_ids:
        request = AlternativeRequest(
            target_schedule=target,
            required_capabilities=["life-support"],
            exclude_ids=target.assigned_staff_ids,
        )
        for alt in suggest_staff(request, resources["staff"], schedules):
            logger.info(f"  Staff option: {alt.resource_name} (priority {alt.priority}) {alt.reason}")


def main():
    logger.info("Starting care schedule conflict report...")
    day = date.today()

    generator = DemoDataGenerator(seed=42)
    resources = generator.generate_resources()
    schedules = generator.generate_snapshot(day, count=40)

    if not schedules:
        logger.error("No schedules available. Exiting.")
        return

    conflicts = detect_conflicts(schedules, ALL_CONFLICT_RULES)
    summary = daily_conflict_summary(day, conflicts, schedules)

    print("\n" + "=" * 50)
    print("DAILY CONFLICT REPORT")
    print("=" * 50)
    print(f"Date:           {summary.date}")
    print(f"Schedules:      {len(schedules)}")
    print(f"Conflicts:      {summary.total_conflicts}")
    print(f"Safety score:   {summary.safety_score} ({summary.safety_level})")
    for kind, count in sorted(summary.counts_by_kind.items()):
        print(f"  - {kind_label(kind)}: {count}")

    report_worst_schedule(schedules, conflicts, resources)
    export_dashboard_data(day, schedules, conflicts)

    print("\nReport complete.")


if __name__ == "__main__":
    main()
