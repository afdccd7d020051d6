"""Check reference-data documents against the adjustment schedule.

Usage:
    python scripts/check_reference_data.py --current current_salary.json \
        --caps max_salary.json --baseline new_salary.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from wageproj.core.config import DataConfig
from wageproj.core.exceptions import WageProjError
from wageproj.engine.schedule import DEFAULT_SCHEDULE, AdjustmentSchedule, load_schedule
from wageproj.reference import ReferenceDataStore, load_reference_data


def find_problems(store: ReferenceDataStore, schedule: AdjustmentSchedule) -> list[str]:
    """List jobs that would project as N/A or uncapped under ``schedule``."""
    cap_columns = list(dict.fromkeys(event.cap_column for event in schedule))
    problems: list[str] = []
    for title in store.job_titles():
        job = store.lookup_job(title)
        baseline = store.lookup_baseline(title)
        if baseline is None:
            problems.append(f"{title}: no baseline entry")
        elif baseline.is_step_based != job.is_step_based:
            problems.append(f"{title}: baseline and current tables disagree on steps vs range")
        elif job.is_step_based:
            missing = [s.number for s in job.steps if baseline.step(s.number) is None]
            if missing:
                problems.append(f"{title}: baseline missing steps {missing}")
        for column in cap_columns:
            if store.lookup_cap(title, column) is None:
                problems.append(f"{title}: no cap for {column!r}")
    return problems


def main(argv: list[str] | None = None) -> int:
    defaults = DataConfig()
    parser = argparse.ArgumentParser(description="Check wage projection reference data")
    parser.add_argument("--current", type=Path, default=defaults.current_path, help="Current wage table")
    parser.add_argument("--caps", type=Path, default=defaults.caps_path, help="Cap table")
    parser.add_argument("--baseline", type=Path, default=defaults.baseline_path, help="Baseline wage table")
    parser.add_argument("--schedule", type=Path, default=None, help="Schedule JSON (default: 2024 agreement)")
    args = parser.parse_args(argv)

    try:
        store = load_reference_data(args.current, args.caps, args.baseline)
        schedule = load_schedule(args.schedule) if args.schedule else DEFAULT_SCHEDULE
    except WageProjError as exc:
        print(f"Error: {exc}")
        return 2

    print(f"Checked {len(store)} job titles against {len(schedule)} events")
    problems = find_problems(store, schedule)
    for problem in problems:
        print(f"  {problem}")
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
