from app.models.domain import BudgetCategory
from app.tools.budget_breakdown import extract_budget_breakdown, percent_of_budget


def test_zero_amounts_are_excluded():
    text = "Budget Breakdown:\n- Accommodation: $500\n- Food: $0\n"
    entries = extract_budget_breakdown(text)
    assert [(e.category, e.amount) for e in entries] == [(BudgetCategory.accommodation, 500.0)]


def test_thousands_separator_and_fixed_order():
    text = (
        "Intro text\n\n"
        "budget breakdown:\n"
        "- Transportation: $1,200.50\n"
        "- Accommodation: $2,000\n"
        "- Miscellaneous: $75\n"
        "\n"
        "Activities: $300\n"
    )
    entries = extract_budget_breakdown(text)
    assert [e.category for e in entries] == [
        BudgetCategory.accommodation,
        BudgetCategory.transportation,
        BudgetCategory.miscellaneous,
    ]
    assert entries[1].amount == 1200.5


def test_section_stops_at_capitalised_line():
    text = "Budget Breakdown:\n- Accommodation: $500\nActivities: $300"
    entries = extract_budget_breakdown(text)
    assert [e.category for e in entries] == [BudgetCategory.accommodation]


def test_single_line_section():
    entries = extract_budget_breakdown("Budget Breakdown: Accommodation: $800, Food: $200")
    assert [e.amount for e in entries] == [800.0, 200.0]


def test_missing_section_returns_empty_list():
    assert extract_budget_breakdown("Accommodation: $500") == []
    assert extract_budget_breakdown("") == []


def test_percent_of_budget():
    assert percent_of_budget(500, 2000) == 25.0
    assert percent_of_budget(500, 0) == 0.0
