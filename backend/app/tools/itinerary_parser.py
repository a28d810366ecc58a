from __future__ import annotations

import re
from datetime import date, timedelta
from typing import List, Optional, Tuple

from app.models.domain import Activity, DayPlan, Period

DAY_PATTERN = re.compile(r"^Day (\d+)", re.IGNORECASE)
ACTIVITY_PATTERN = re.compile(
    r"^(\d{1,2}:\d{2}(?:\s*[AP]M)?|\d{1,2}\s*[AP]M|Morning|Afternoon|Evening)"
    r"[\s\-:]+(?![AP]M\s*$)(.*\w.*)$",
    re.IGNORECASE,
)
COST_PATTERN = re.compile(r"\$(\d+(?:\.\d{2})?)")
HOUR_PATTERN = re.compile(r"^(\d{1,2})")


def classify_period(time_token: str) -> Period:
    """
    Map a time token to morning/afternoon/evening.

    Clock tokens are compared on their 24-hour hour, so "6:00 PM" is evening
    while "2:30 PM" stays afternoon.
    """
    lower = time_token.lower()
    if "afternoon" in lower:
        return Period.afternoon
    if "evening" in lower:
        return Period.evening
    is_pm = "pm" in lower
    match = HOUR_PATTERN.match(time_token.strip())
    if match:
        hour = int(match.group(1))
        if is_pm and hour < 12:
            hour += 12
        if hour >= 18:
            return Period.evening
    if is_pm:
        return Period.afternoon
    return Period.morning


def extract_cost(text: str) -> Tuple[str, Optional[float]]:
    """Return the text with every ``$amount`` removed, plus the first amount found."""
    match = COST_PATTERN.search(text)
    if not match:
        return text, None
    stripped = COST_PATTERN.sub("", text)
    stripped = re.sub(r"\s{2,}", " ", stripped).strip()
    return stripped, float(match.group(1))


def parse_activity_line(line: str) -> Optional[Activity]:
    match = ACTIVITY_PATTERN.match(line)
    if not match:
        return None
    time_token, remainder = match.group(1), match.group(2).strip()
    description, cost = extract_cost(remainder)
    return Activity(
        time=time_token,
        description=description,
        period=classify_period(time_token),
        cost=cost,
    )


def _day_marker(start_date: date, digits: str) -> Optional[Tuple[int, date]]:
    try:
        day_number = int(digits)
        return day_number, start_date + timedelta(days=day_number - 1)
    except (ValueError, OverflowError):
        # Numbers too long to convert or outside the calendar are not day markers.
        return None


def parse_itinerary_text(text: str, start_date: date) -> List[DayPlan]:
    """
    Split generated itinerary text into day plans.

    A line starting with "Day N" opens day N, dated ``start_date + N - 1``.
    Inside a day, lines starting with a clock time or Morning/Afternoon/Evening
    become activities; everything else is skipped. Text without day markers
    gives an empty list.
    """
    days: List[DayPlan] = []
    current: Optional[DayPlan] = None

    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue

        day_match = DAY_PATTERN.match(line)
        if day_match:
            marker = _day_marker(start_date, day_match.group(1))
            if marker is None:
                continue
            day_number, day_date = marker
            if current is not None:
                days.append(current)
            current = DayPlan(day=day_number, date=day_date)
            continue

        if current is None:
            continue
        activity = parse_activity_line(line)
        if activity:
            current.activities.append(activity)

    if current is not None:
        days.append(current)
    return days
