"""
Schedule extraction: turns time-prefixed lines of free text into activity slots.
"""

import re
import uuid
from datetime import datetime, timedelta
from typing import List, Optional

from ..config.settings import SLOT_DURATION_MINUTES
from ..core.models import ActivityCategory, PlannedActivitySlot

# "2:00", "2:00 pm", "2pm", "11 AM". Only the first match on a line is used.
TIME_PATTERN = re.compile(
    r"\b(\d{1,2}:\d{2}(?!\d)(?:\s*[ap]m\b)?|\d{1,2}\s*[ap]m\b)",
    re.IGNORECASE,
)

# Characters trimmed from both sides of the removed time expression
_SEPARATORS = " \t-:–—*•"

MIN_TITLE_LENGTH = 4

CATEGORY_KEYWORDS = (
    (ActivityCategory.RESTAURANT, ("eat", "dinner", "lunch", "restaurant")),
    (ActivityCategory.ACCOMMODATION, ("hotel", "stay", "accommodation")),
    (ActivityCategory.TRANSPORTATION, ("drive", "transport", "travel")),
)


def parse_time(time_str: str, now: Optional[datetime] = None) -> datetime:
    """
    Normalize a time expression to a timestamp on the day after ``now``.

    Accepts ``H:MM``, ``H:MM am|pm`` and ``H am|pm``. Raises ValueError when
    the expression holds no digits or the hour/minute is out of range.
    """
    now = now or datetime.now()
    tomorrow = now + timedelta(days=1)
    clean = re.sub(r"\s", "", time_str.lower())

    if ":" in clean:
        hour_part, minute_part = clean.split(":", 1)
        hours = int(hour_part)
        minutes = int(re.sub(r"\D", "", minute_part) or 0)
    else:
        digits = re.sub(r"\D", "", clean)
        if not digits:
            raise ValueError(f"No hour found in time expression {time_str!r}")
        hours = int(digits)
        minutes = 0

    if "pm" in clean and hours != 12:
        hours += 12
    elif "am" in clean and hours == 12:
        hours = 0

    return tomorrow.replace(hour=hours, minute=minutes, second=0, microsecond=0)


def classify_activity(text: str) -> ActivityCategory:
    """Pick the activity category from keywords in its title."""
    lowered = text.lower()
    for category, words in CATEGORY_KEYWORDS:
        if any(word in lowered for word in words):
            return category
    return ActivityCategory.ATTRACTION


def _activity_text(line: str, match: "re.Match") -> str:
    before = line[:match.start()].strip(_SEPARATORS)
    after = line[match.end():].strip(_SEPARATORS)
    return " ".join(part for part in (before, after) if part)


def extract_schedule(text: str, now: Optional[datetime] = None) -> List[PlannedActivitySlot]:
    """Build one activity per line that starts, ends or contains a time expression."""
    now = now or datetime.now()
    activities = []

    for line in text.splitlines():
        if not line.strip():
            continue
        match = TIME_PATTERN.search(line)
        if not match:
            continue

        title = _activity_text(line, match)
        if len(title) < MIN_TITLE_LENGTH:
            continue

        try:
            start_time = parse_time(match.group(0), now)
        except ValueError:
            # "25:00" and similar are noise, not activities
            continue

        activities.append(PlannedActivitySlot(
            id=uuid.uuid4().hex,
            title=title,
            description=title,
            start_time=start_time,
            end_time=start_time + timedelta(minutes=SLOT_DURATION_MINUTES),
            category=classify_activity(title),
        ))

    return activities
