from datetime import date

import pytest

from app.llm.backends.ollama_backend import OllamaItineraryBackend
from app.llm.planner import ItineraryGenerator, MockItineraryBackend
from app.llm.prompts import build_itinerary_prompt
from app.models.domain import (
    BudgetCategory,
    Period,
    TravelPreferences,
    TripContext,
    UserProfile,
)
from app.models.schemas import PreferencesSchema, TripRequest
from app.services.planning_service import PlanningService
from app.storage.repository import InMemoryRepository
from app.tools.budget_breakdown import extract_budget_breakdown
from app.tools.itinerary_parser import parse_itinerary_text
from app.tools.preferences_tool import PreferencesTool

CONTEXT = TripContext(
    destination="Lisbon",
    start_date=date(2024, 6, 1),
    end_date=date(2024, 6, 3),
    budget=1500.0,
    group_size=2,
)


class FailingBackend:
    def generate_itinerary(self, context):
        raise RuntimeError("model unavailable")


def test_mock_itinerary_parses_into_one_day_per_calendar_day():
    text = MockItineraryBackend().generate_itinerary(CONTEXT)
    days = parse_itinerary_text(text, CONTEXT.start_date)

    assert [d.date for d in days] == [date(2024, 6, 1), date(2024, 6, 2), date(2024, 6, 3)]
    assert all(len(d.activities) == 3 for d in days)
    first = days[0].activities
    assert [a.period for a in first] == [Period.morning, Period.afternoon, Period.evening]
    assert first[0].cost == 50.0
    assert days[1].activities[2].time == "Evening"


def test_mock_itinerary_budget_breakdown():
    text = MockItineraryBackend().generate_itinerary(CONTEXT)
    entries = {e.category: e.amount for e in extract_budget_breakdown(text)}
    assert entries == {
        BudgetCategory.accommodation: 600.0,
        BudgetCategory.activities: 375.0,
        BudgetCategory.food: 300.0,
        BudgetCategory.transportation: 150.0,
        BudgetCategory.miscellaneous: 75.0,
    }


def test_prompt_includes_trip_details_and_defaults():
    prompt = build_itinerary_prompt(CONTEXT)
    assert "Create a detailed 2-day travel itinerary for Lisbon." in prompt
    assert "Budget: $1500 USD total" in prompt
    assert "Budget per person per day: $375" in prompt
    assert "Favorite Activities: General sightseeing" in prompt
    assert "Travel Style: Balanced" in prompt
    assert "IMPORTANT SEASONAL CONTEXT for Lisbon in June" in prompt
    assert "Budget Breakdown:" in prompt
    assert "Languages: English" in prompt
    assert "Special Requirements: None" in prompt
    assert "Seasonal health considerations" in prompt


def test_prompt_uses_given_preferences():
    context = TripContext(
        destination="Kyoto",
        start_date=date(2024, 4, 1),
        end_date=date(2024, 4, 1),
        budget=800.0,
        preferences=TravelPreferences(activities=["temples", "food"], travel_style="Slow"),
    )
    prompt = build_itinerary_prompt(context)
    assert "Favorite Activities: temples, food" in prompt
    assert "Travel Style: Slow" in prompt
    assert "(1 days)" in prompt


PROFILE = UserProfile(
    user_id="demo-user",
    favorite_activities=["surfing"],
    travel_style="Adventurous",
    accommodation_preference="Hostels",
    languages=["Portuguese", "English"],
)


def test_saved_profile_fills_only_missing_preferences():
    context = TripContext(
        destination="Lisbon",
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 3),
        budget=1500.0,
        preferences=TravelPreferences(travel_style="Slow"),
    )
    merged = PreferencesTool().merge_with_profile(context.preferences, PROFILE)

    assert merged.activities == ["surfing"]
    assert merged.travel_style == "Slow"
    assert merged.accommodation == "Hostels"
    assert merged.special_requirements is None

    prompt = build_itinerary_prompt(context, PROFILE)
    assert "Favorite Activities: surfing" in prompt
    assert "Travel Style: Slow" in prompt
    assert "Accommodation Type: Hostels" in prompt
    assert "Languages: Portuguese, English" in prompt
    assert "Special Requirements: None" in prompt


def test_without_profile_preferences_are_unchanged():
    prefs = TravelPreferences(activities=["food"])
    assert PreferencesTool().merge_with_profile(prefs, None) is prefs


def test_planning_service_applies_saved_profile():
    repository = InMemoryRepository()
    repository.save_profile(PROFILE)
    service = PlanningService(repository=repository)
    service.generator = ItineraryGenerator(backend=MockItineraryBackend())
    request = TripRequest(
        destination="Lisbon",
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 2),
        budget=900.0,
        preferences=PreferencesSchema(activities=["museums"]),
    )

    trip = service.create_trip(user_id="demo-user", request=request)

    assert trip.preferences.activities == ["museums"]
    assert trip.preferences.travel_style == "Adventurous"
    assert trip.preferences.languages == ["Portuguese", "English"]


def test_generator_reraises_backend_errors():
    with pytest.raises(RuntimeError):
        ItineraryGenerator(backend=FailingBackend()).generate(CONTEXT)


def test_planning_service_falls_back_to_mock():
    service = PlanningService(repository=InMemoryRepository())
    service.generator = ItineraryGenerator(backend=FailingBackend())
    service.fallback_generator = ItineraryGenerator(backend=MockItineraryBackend())
    request = TripRequest(
        destination="Lisbon",
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 2),
        budget=900.0,
    )

    trip = service.create_trip(user_id="demo-user", request=request)

    assert trip.content.startswith("2-Day Itinerary for Lisbon")
    assert service.repository.get_trip(trip.trip_id) is not None


def test_planning_service_without_fallback_raises():
    service = PlanningService(repository=InMemoryRepository())
    service.generator = ItineraryGenerator(backend=FailingBackend())
    service.fallback_generator = None
    request = TripRequest(
        destination="Lisbon",
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 2),
        budget=900.0,
    )
    with pytest.raises(RuntimeError):
        service.create_trip(user_id="demo-user", request=request)


class _FakeResponse:
    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self):
        return None

    def json(self):
        return self._payload


def test_ollama_backend_returns_model_text(monkeypatch):
    calls = {}

    def fake_post(url, json, timeout):
        calls["url"] = url
        calls["payload"] = json
        return _FakeResponse({"message": {"content": "Day 1\n9:00 AM Tour $10"}})

    monkeypatch.setattr("app.llm.backends.ollama_backend.requests.post", fake_post)
    backend = OllamaItineraryBackend(host="http://ollama:11434", model="llama3")

    text = backend.generate_itinerary(CONTEXT)

    assert text.startswith("Day 1")
    assert calls["url"] == "http://ollama:11434/api/chat"
    assert calls["payload"]["messages"][0]["role"] == "system"
    assert "Lisbon" in calls["payload"]["messages"][1]["content"]


def test_ollama_backend_rejects_empty_reply(monkeypatch):
    monkeypatch.setattr(
        "app.llm.backends.ollama_backend.requests.post",
        lambda url, json, timeout: _FakeResponse({"message": {"content": "  "}}),
    )
    with pytest.raises(ValueError):
        OllamaItineraryBackend().generate_itinerary(CONTEXT)
