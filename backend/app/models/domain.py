from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional


class Region(str, Enum):
    europe = "europe"
    asia = "asia"
    tropical = "tropical"
    general = "general"


class Season(str, Enum):
    spring = "Spring"
    summer = "Summer"
    fall = "Fall"
    winter = "Winter"
    monsoon = "Monsoon Season"
    dry = "Dry Season"
    wet = "Wet Season"


class WeatherIcon(str, Enum):
    sun = "sun"
    cloud = "cloud"
    cloud_rain = "cloud_rain"
    snowflake = "snowflake"


class Period(str, Enum):
    morning = "morning"
    afternoon = "afternoon"
    evening = "evening"


class BudgetCategory(str, Enum):
    accommodation = "Accommodation"
    activities = "Activities"
    food = "Food"
    transportation = "Transportation"
    miscellaneous = "Miscellaneous"


class ExpenseCategory(str, Enum):
    accommodation = "accommodation"
    food = "food"
    transportation = "transportation"
    activities = "activities"
    shopping = "shopping"
    miscellaneous = "miscellaneous"


class BudgetStatus(str, Enum):
    on_track = "on_track"
    warning = "warning"
    over_budget = "over_budget"


@dataclass(frozen=True)
class TravelPreferences:
    activities: List[str] = field(default_factory=list)
    travel_style: Optional[str] = None
    accommodation: Optional[str] = None
    special_requirements: Optional[str] = None
    languages: List[str] = field(default_factory=list)


@dataclass
class UserProfile:
    user_id: str
    favorite_activities: List[str] = field(default_factory=list)
    travel_style: Optional[str] = None
    accommodation_preference: Optional[str] = None
    special_requirements: Optional[str] = None
    languages: List[str] = field(default_factory=list)
    preferred_destinations: List[str] = field(default_factory=list)
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class TripContext:
    destination: str
    start_date: date
    end_date: date
    budget: float
    group_size: int = 1
    preferences: TravelPreferences = field(default_factory=TravelPreferences)

    @property
    def duration_days(self) -> int:
        return max((self.end_date - self.start_date).days, 1)

    @property
    def budget_per_person(self) -> float:
        return self.budget / self.group_size if self.group_size > 0 else self.budget


@dataclass
class Trip:
    trip_id: str
    user_id: str
    context: TripContext
    content: str
    created_at: datetime


@dataclass
class WeatherSummary:
    temperature: str
    conditions: str
    rainfall: str
    icon: WeatherIcon


@dataclass
class SeasonalRecommendation:
    region: Region
    season: Season
    weather: WeatherSummary
    recommended_activities: List[str]
    avoid_activities: List[str]
    essential_packing: List[str]
    optional_packing: List[str]
    tips: List[str]
    alerts: List[str]


@dataclass
class Activity:
    time: str
    description: str
    period: Period
    cost: Optional[float] = None


@dataclass
class DayPlan:
    day: int
    date: date
    activities: List[Activity] = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"{self.date:%A}, {self.date:%b} {self.date.day}"


@dataclass
class BudgetCategoryAmount:
    category: BudgetCategory
    amount: float


@dataclass
class ExpenseRecord:
    expense_id: str
    trip_id: str
    category: ExpenseCategory
    amount: float
    expense_date: date
    description: str = ""


@dataclass
class BudgetSummary:
    total_budget: float
    total_spent: float
    remaining: float
    percent_used: float
    by_category: Dict[str, float]
    status: BudgetStatus
