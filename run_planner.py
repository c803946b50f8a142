"""
Main Execution Script for the Vaccination Hub Planner.

Loads the planning config (JSON) and the people CSV, computes the weekly
allocation plan, prints a report and optionally exports the plan as JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from models import PlanningConfig
from scheduler import VaccinationPlanner, WeekPlan
from exceptions.custom_errors import PlannerError
from ingestion.csv_loader import CollectingReporter

logger = logging.getLogger("Main")

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def load_config(filename: Path) -> PlanningConfig:
    """Reads and validates the JSON planning config."""
    with open(filename, 'r') as f:
        return PlanningConfig.model_validate_json(f.read())


def plan_to_json(plan: WeekPlan) -> dict:
    """Sets are not JSON friendly: export sorted SSN lists keyed by weekday name."""
    return {
        WEEKDAYS[day]: {hub: sorted(ssns) for hub, ssns in hubs.items()}
        for day, hubs in plan.items()
    }


def export_plan(planner: VaccinationPlanner, plan: WeekPlan, filename: Path) -> None:
    logger.info(f"💾 Exporting plan to {filename}...")
    data = {
        "availability": planner.get_weekly_availability(),
        "time_slots": dict(zip(WEEKDAYS, planner.get_time_slot_labels())),
        "plan": plan_to_json(plan),
        "statistics": planner.stats.summary(),
    }
    with open(filename, 'w') as f:
        json.dump(data, f, indent=2)
    logger.info("✅ Plan exported.")


def print_report(planner: VaccinationPlanner, plan: WeekPlan) -> None:
    stats = planner.stats.summary()

    print("\n" + "=" * 50)
    print("📊 WEEKLY ALLOCATION REPORT")
    print("=" * 50)
    print(f"People registered:  {stats['total_people']}")
    print(f"People allocated:   {stats['allocated']}")
    print(f"Still waiting:      {stats['unallocated']}")

    print("\nPer day / hub:")
    for day, hubs in plan.items():
        counts = ", ".join(f"{hub}={len(ssns)}" for hub, ssns in hubs.items())
        print(f"  {WEEKDAYS[day]}: {counts or '-'}")

    print("\nAge interval   covered   share of allocated")
    coverage = stats["proportion_by_age_interval"]
    distribution = stats["distribution_by_age_interval"]
    for label in planner.get_age_intervals():
        cov = "n/a" if coverage[label] is None else f"{coverage[label]:.1%}"
        dist = "n/a" if distribution[label] is None else f"{distribution[label]:.1%}"
        print(f"  {label:<12} {cov:>8}   {dist:>8}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute a weekly vaccination allocation plan.")
    parser.add_argument("config", type=Path, help="JSON planning config (hubs, hours, age breakpoints)")
    parser.add_argument("people", type=Path, help="People CSV with header SSN,LAST,FIRST,YEAR")
    parser.add_argument("--output", type=Path, default=None, help="Write the plan as JSON to this file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    try:
        config = load_config(args.config)
    except (OSError, ValidationError) as e:
        logger.error(f"❌ Could not read config {args.config}: {e}")
        return 2

    reporter = CollectingReporter()
    try:
        planner = VaccinationPlanner.from_config(config)
        with open(args.people, 'r') as f:
            added = planner.load_people(f, reporter)
        logger.info(f"📋 {added} people loaded, {len(reporter.errors)} lines skipped")
        for line_number, raw in reporter.errors:
            logger.warning(f"⚠️ Skipped line {line_number}: {raw!r}")

        plan = planner.allocate_week()
    except OSError as e:
        logger.error(f"❌ Could not read people file {args.people}: {e}")
        return 2
    except PlannerError as e:
        logger.error(f"❌ Planning failed: {e}")
        return 1

    print_report(planner, plan)
    if args.output:
        export_plan(planner, plan, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
