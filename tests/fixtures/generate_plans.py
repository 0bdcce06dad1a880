"""
Generate realistic plan replies, with the entries they should parse to.

Mimics what the planning model sends back: a DAY<n> header per day, a few
bullets per day, and now and then some chatter the parser must skip.
"""

import random
from datetime import date, timedelta

from faker import Faker

SUBJECTS = ["Maths", "English", "Physics", "Chemistry", "History", "Biology", "Spanish"]

ACTIVITIES = [
    "Read chapter {n} of {subject}",
    "{subject} practice problems set {n}",
    "Review {subject} notes",
    "Flashcards: {subject} vocabulary",
    "Past paper {n} ({subject})",
    "Watch {subject} lecture {n}",
]

DURATIONS = ["0.5", "1", "1.5", "2", "2.5", "3"]

HEADER_STYLES = ["DAY{n}:", "Day {n}:", "DAY {n}", "day{n} -"]

CHATTER = [
    "Here is your schedule:",
    "Good luck!",
    "Remember to take breaks.",
    "---",
]


def generate_plan(
    start: date, days: int = 7, seed: int | None = None
) -> tuple[str, list[dict]]:
    """
    Build a plan reply and the expected parse.

    Returns (text, expected) where expected is a list of
    {"task", "duration", "date"} dicts in line order.
    """
    rng = random.Random(seed)
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    lines = [rng.choice(CHATTER)]
    expected = []

    for day in range(1, days + 1):
        lines.append(rng.choice(HEADER_STYLES).format(n=day))
        day_date = (start + timedelta(days=day - 1)).isoformat()

        for _ in range(rng.randint(1, 4)):
            task = rng.choice(ACTIVITIES).format(
                n=rng.randint(1, 12), subject=rng.choice(SUBJECTS)
            )
            duration = rng.choice(DURATIONS)
            bullet = rng.choice(["-", "•"])
            padding = " " * rng.randint(0, 3)
            lines.append(f"{padding}{bullet} {task} @ {duration}{padding}")
            expected.append({"task": task, "duration": float(duration), "date": day_date})

        if rng.random() < 0.3:
            lines.append(fake.sentence())

    lines.append(rng.choice(CHATTER))
    line_ending = rng.choice(["\n", "\r\n"])
    return line_ending.join(lines), expected
