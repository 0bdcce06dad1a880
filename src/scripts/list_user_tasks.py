#!/usr/bin/env python3
"""
List a user's stored tasks, grouped by date.

Usage:
    uv run python src/scripts/list_user_tasks.py <user_id>
"""

import argparse
import sys
from itertools import groupby
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.database import get_connection, get_user_by_id, list_tasks


def main():
    parser = argparse.ArgumentParser(description="List a user's tasks")
    parser.add_argument("user_id", type=int, help="User id")
    args = parser.parse_args()

    conn = get_connection()
    try:
        user = get_user_by_id(conn, args.user_id)
        if user is None:
            print(f"No user with id {args.user_id}")
            sys.exit(1)

        tasks = list_tasks(conn, args.user_id)
    finally:
        conn.close()

    print(f"User: {user['email']} ({len(tasks)} tasks)")
    print("=" * 80)

    for task_date, day_tasks in groupby(tasks, key=lambda t: t["date"]):
        print(f"\n{task_date}")
        for task in day_tasks:
            mark = "x" if task["done"] else " "
            print(f"  [{mark}] #{task['id']} {task['task']} ({task['duration']:g}h)")

    print("\nDone!")


if __name__ == "__main__":
    main()
