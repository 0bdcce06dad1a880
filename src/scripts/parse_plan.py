#!/usr/bin/env python3
"""
Parse a saved plan reply into dated tasks, without calling the model.

Useful for checking how a language model reply will be stored.

Usage:
    uv run python src/scripts/parse_plan.py <plan.txt> [--date YYYY-MM-DD] [--json]

Example:
    uv run python src/scripts/parse_plan.py samples/week_plan.txt --date 2025-05-22
"""

import argparse
import json
import sys
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.schedule_parser import parse_schedule_text


def parse_date_arg(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected YYYY-MM-DD, got '{value}'")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Parse a DAY<n>/bullet plan text file into dated tasks"
    )
    parser.add_argument(
        "plan_file",
        type=Path,
        help="Path to the plan text ('-' for stdin)",
    )
    parser.add_argument(
        "--date",
        type=parse_date_arg,
        default=None,
        help="Date of DAY1 (YYYY-MM-DD). Uses today if omitted.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print entries as a JSON array",
    )

    args = parser.parse_args(argv)

    if str(args.plan_file) == "-":
        plan_text = sys.stdin.read()
    else:
        try:
            plan_text = args.plan_file.read_text(encoding="utf-8")
        except OSError as e:
            print(f"\nError: {e}")
            return 1

    entries = parse_schedule_text(plan_text, args.date)

    if args.json:
        print(json.dumps([entry.to_dict() for entry in entries], indent=2))
        return 0

    if not entries:
        print("No tasks found.")
        return 0

    for entry in entries:
        print(f"{entry.date}  {entry.duration_hours:>5g}h  {entry.task}")
    print(f"\n{len(entries)} tasks, {sum(e.duration_hours for e in entries):g} hours")
    return 0


if __name__ == "__main__":
    sys.exit(main())
