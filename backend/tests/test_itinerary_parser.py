from datetime import date

from app.models.domain import Period
from app.tools.itinerary_parser import classify_period, extract_cost, parse_itinerary_text

ITINERARY = """Your Lisbon trip
Morning - coffee before the trip starts

Day 1: Arrival
9:00 AM City tour
6:00 PM Dinner at $45 restaurant
Remember to bring a jacket

Day 2
Morning - Hike $12.50 and $3 snacks
Afternoon: Museum
Evening Night market
19:30 Concert
"""


def test_parse_two_days_with_dates():
    days = parse_itinerary_text(ITINERARY, date(2024, 6, 1))
    assert [d.day for d in days] == [1, 2]
    assert [d.date for d in days] == [date(2024, 6, 1), date(2024, 6, 2)]
    assert days[0].label == "Saturday, Jun 1"


def test_activity_period_and_cost():
    days = parse_itinerary_text(ITINERARY, date(2024, 6, 1))
    tour, dinner = days[0].activities
    assert tour.time == "9:00 AM"
    assert tour.period == Period.morning
    assert tour.cost is None
    assert tour.description == "City tour"
    assert dinner.period == Period.evening
    assert dinner.cost == 45.0
    assert "$45" not in dinner.description
    assert dinner.description == "Dinner at restaurant"


def test_every_cost_is_stripped_and_first_is_kept():
    hike = parse_itinerary_text(ITINERARY, date(2024, 6, 1))[1].activities[0]
    assert hike.time == "Morning"
    assert hike.cost == 12.5
    assert hike.description == "Hike and snacks"


def test_lines_outside_grammar_are_ignored():
    days = parse_itinerary_text(ITINERARY, date(2024, 6, 1))
    assert len(days[0].activities) == 2
    assert [a.period for a in days[1].activities] == [
        Period.morning,
        Period.afternoon,
        Period.evening,
        Period.evening,
    ]


def test_no_day_markers_returns_empty_list():
    assert parse_itinerary_text("9:00 AM Breakfast\nJust some prose.", date(2024, 6, 1)) == []
    assert parse_itinerary_text("", date(2024, 6, 1)) == []


def test_empty_days_are_kept_and_indices_trusted():
    days = parse_itinerary_text("day 3\nDAY 5\n9 AM Breakfast", date(2024, 6, 1))
    assert [d.day for d in days] == [3, 5]
    assert days[0].activities == []
    assert days[0].date == date(2024, 6, 3)
    assert days[1].activities[0].time == "9 AM"


def test_out_of_range_day_number_is_not_a_marker():
    assert parse_itinerary_text("Day 99999999999\n9:00 AM Tour", date(2024, 6, 1)) == []


def test_day_number_too_long_to_convert_is_skipped():
    text = "Day " + "1" * 5000 + "\nDay 1\n9:00 AM Tour"
    days = parse_itinerary_text(text, date(2024, 6, 1))
    assert [d.day for d in days] == [1]
    assert [a.description for a in days[0].activities] == ["Tour"]


def test_time_without_description_is_not_an_activity():
    text = "Day 1\n9:00 AM\n9 AM\n6:30 pm  \nMorning -\n10:00 AM Tour"
    activities = parse_itinerary_text(text, date(2024, 6, 1))[0].activities
    assert [(a.time, a.description) for a in activities] == [("10:00 AM", "Tour")]


def test_description_starting_with_am_letters_keeps_bare_time():
    days = parse_itinerary_text("Day 1\n9:00 AMsterdam walk", date(2024, 6, 1))
    activities = days[0].activities
    assert activities[0].time == "9:00"
    assert activities[0].description == "AMsterdam walk"


def test_classify_period():
    assert classify_period("9:00 AM") == Period.morning
    assert classify_period("12:30 PM") == Period.afternoon
    assert classify_period("2:30 PM") == Period.afternoon
    assert classify_period("6:00 PM") == Period.evening
    assert classify_period("7pm") == Period.evening
    assert classify_period("20:00") == Period.evening
    assert classify_period("14:00") == Period.morning
    assert classify_period("Afternoon") == Period.afternoon
    assert classify_period("evening") == Period.evening
    assert classify_period("Morning") == Period.morning


def test_extract_cost_without_amount_leaves_text_alone():
    assert extract_cost("Free walking  tour") == ("Free walking  tour", None)


def test_parse_is_repeatable():
    assert parse_itinerary_text(ITINERARY, date(2024, 6, 1)) == parse_itinerary_text(
        ITINERARY, date(2024, 6, 1)
    )
