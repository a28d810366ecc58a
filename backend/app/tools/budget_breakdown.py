from __future__ import annotations

import re
from typing import List

from app.models.domain import BudgetCategory, BudgetCategoryAmount

# Ends at a blank line, a line starting with a capital letter, or end of text.
SECTION_PATTERN = re.compile(r"(?i:budget breakdown:)[\s\S]*?(?=\n[ \t]*\n|\n[A-Z]|\Z)")

CATEGORY_PATTERNS = [
    (
        category,
        re.compile(
            rf"{category.value}:\s*\$(\d+(?:,\d{{3}})*(?:\.\d{{2}})?)",
            re.IGNORECASE,
        ),
    )
    for category in BudgetCategory
]


def extract_budget_breakdown(text: str) -> List[BudgetCategoryAmount]:
    """
    Read per-category estimates from the "Budget Breakdown:" section.

    Categories come back in fixed order and only with a positive amount.
    Without a section the result is empty.
    """
    section = SECTION_PATTERN.search((text or "").replace("\r\n", "\n"))
    if not section:
        return []

    entries: List[BudgetCategoryAmount] = []
    for category, pattern in CATEGORY_PATTERNS:
        match = pattern.search(section.group(0))
        amount = float(match.group(1).replace(",", "")) if match else 0.0
        if amount > 0:
            entries.append(BudgetCategoryAmount(category=category, amount=amount))
    return entries


def percent_of_budget(amount: float, total_budget: float) -> float:
    return (amount / total_budget) * 100 if total_budget > 0 else 0.0
