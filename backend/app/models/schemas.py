from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from app.models.domain import (
    Activity,
    BudgetCategory,
    BudgetCategoryAmount,
    BudgetStatus,
    BudgetSummary,
    DayPlan,
    ExpenseCategory,
    ExpenseRecord,
    Period,
    Region,
    Season,
    SeasonalRecommendation,
    TravelPreferences,
    Trip,
    TripContext,
    UserProfile,
    WeatherIcon,
)


class PreferencesSchema(BaseModel):
    activities: List[str] = Field(default_factory=list)
    travel_style: Optional[str] = None
    accommodation: Optional[str] = None
    special_requirements: Optional[str] = None
    languages: List[str] = Field(default_factory=list)

    def to_domain(self) -> TravelPreferences:
        return TravelPreferences(
            activities=list(self.activities),
            travel_style=self.travel_style,
            accommodation=self.accommodation,
            special_requirements=self.special_requirements,
            languages=list(self.languages),
        )

    @classmethod
    def from_domain(cls, obj: TravelPreferences) -> "PreferencesSchema":
        return cls(
            activities=list(obj.activities),
            travel_style=obj.travel_style,
            accommodation=obj.accommodation,
            special_requirements=obj.special_requirements,
            languages=list(obj.languages),
        )


class UserProfileUpdate(BaseModel):
    favorite_activities: List[str] = Field(default_factory=list)
    travel_style: Optional[str] = None
    accommodation_preference: Optional[str] = None
    special_requirements: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    preferred_destinations: List[str] = Field(default_factory=list)


class UserProfileSchema(UserProfileUpdate):
    user_id: str
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, obj: UserProfile) -> "UserProfileSchema":
        return cls(
            user_id=obj.user_id,
            favorite_activities=list(obj.favorite_activities),
            travel_style=obj.travel_style,
            accommodation_preference=obj.accommodation_preference,
            special_requirements=obj.special_requirements,
            languages=list(obj.languages),
            preferred_destinations=list(obj.preferred_destinations),
            updated_at=obj.updated_at,
        )


class TripRequest(BaseModel):
    destination: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    budget: float = Field(..., ge=0)
    group_size: int = Field(1, ge=1)
    preferences: PreferencesSchema = Field(default_factory=PreferencesSchema)

    @model_validator(mode="after")
    def check_dates(self) -> "TripRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def to_context(self) -> TripContext:
        return TripContext(
            destination=self.destination,
            start_date=self.start_date,
            end_date=self.end_date,
            budget=self.budget,
            group_size=self.group_size,
            preferences=self.preferences.to_domain(),
        )


class TripImportRequest(TripRequest):
    content: str = Field(..., min_length=1)


class TripSchema(BaseModel):
    trip_id: str
    user_id: str
    destination: str
    start_date: date
    end_date: date
    budget: float
    group_size: int
    preferences: PreferencesSchema
    content: str
    created_at: datetime

    @classmethod
    def from_domain(cls, obj: Trip) -> "TripSchema":
        ctx = obj.context
        return cls(
            trip_id=obj.trip_id,
            user_id=obj.user_id,
            destination=ctx.destination,
            start_date=ctx.start_date,
            end_date=ctx.end_date,
            budget=ctx.budget,
            group_size=ctx.group_size,
            preferences=PreferencesSchema.from_domain(ctx.preferences),
            content=obj.content,
            created_at=obj.created_at,
        )


class TripListResponse(BaseModel):
    trips: List[TripSchema]


class ActivitySchema(BaseModel):
    time: str
    description: str
    period: Period
    cost: Optional[float] = None

    @classmethod
    def from_domain(cls, obj: Activity) -> "ActivitySchema":
        return cls(
            time=obj.time,
            description=obj.description,
            period=obj.period,
            cost=obj.cost,
        )


class DayPlanSchema(BaseModel):
    day: int
    date: date
    label: str
    activities: List[ActivitySchema]

    @classmethod
    def from_domain(cls, obj: DayPlan) -> "DayPlanSchema":
        return cls(
            day=obj.day,
            date=obj.date,
            label=obj.label,
            activities=[ActivitySchema.from_domain(a) for a in obj.activities],
        )


class TimelineResponse(BaseModel):
    trip_id: str
    days: List[DayPlanSchema]
    fallback_text: Optional[str] = None


class BudgetCategoryAmountSchema(BaseModel):
    category: BudgetCategory
    amount: float
    percent_of_budget: float

    @classmethod
    def from_domain(cls, obj: BudgetCategoryAmount, percent: float) -> "BudgetCategoryAmountSchema":
        return cls(category=obj.category, amount=obj.amount, percent_of_budget=percent)


class BudgetBreakdownResponse(BaseModel):
    trip_id: str
    total_budget: float
    entries: List[BudgetCategoryAmountSchema]
    fallback_text: Optional[str] = None


class WeatherSummarySchema(BaseModel):
    temperature: str
    conditions: str
    rainfall: str
    icon: WeatherIcon


class SeasonalRecommendationSchema(BaseModel):
    destination: str
    region: Region
    season: Season
    weather: WeatherSummarySchema
    recommended_activities: List[str]
    avoid_activities: List[str]
    essential_packing: List[str]
    optional_packing: List[str]
    tips: List[str]
    alerts: List[str]

    @classmethod
    def from_domain(
        cls, obj: SeasonalRecommendation, destination: str
    ) -> "SeasonalRecommendationSchema":
        return cls(
            destination=destination,
            region=obj.region,
            season=obj.season,
            weather=WeatherSummarySchema(
                temperature=obj.weather.temperature,
                conditions=obj.weather.conditions,
                rainfall=obj.weather.rainfall,
                icon=obj.weather.icon,
            ),
            recommended_activities=obj.recommended_activities,
            avoid_activities=obj.avoid_activities,
            essential_packing=obj.essential_packing,
            optional_packing=obj.optional_packing,
            tips=obj.tips,
            alerts=obj.alerts,
        )


class TripOverviewSchema(BaseModel):
    trip_id: str
    destination: str
    day_count: int
    activity_count: int
    duration_days: int
    budget_per_person: int
    budget_per_person_per_day: int


class ExpenseCreate(BaseModel):
    category: ExpenseCategory
    amount: float = Field(..., ge=0)
    description: str = ""
    expense_date: date = Field(default_factory=date.today)


class ExpenseSchema(BaseModel):
    expense_id: str
    trip_id: str
    category: ExpenseCategory
    amount: float
    description: str
    expense_date: date

    @classmethod
    def from_domain(cls, obj: ExpenseRecord) -> "ExpenseSchema":
        return cls(
            expense_id=obj.expense_id,
            trip_id=obj.trip_id,
            category=obj.category,
            amount=obj.amount,
            description=obj.description,
            expense_date=obj.expense_date,
        )


class ExpenseListResponse(BaseModel):
    expenses: List[ExpenseSchema]


class CategorySpendingSchema(BaseModel):
    category: ExpenseCategory
    spent: float
    share: float


class BudgetSummarySchema(BaseModel):
    trip_id: str
    total_budget: float
    total_spent: float
    remaining: float
    percent_used: float
    by_category: Dict[str, float]
    status: BudgetStatus
    categories: List[CategorySpendingSchema]

    @classmethod
    def from_domain(
        cls, obj: BudgetSummary, trip_id: str, categories: List[dict]
    ) -> "BudgetSummarySchema":
        return cls(
            trip_id=trip_id,
            total_budget=obj.total_budget,
            total_spent=obj.total_spent,
            remaining=obj.remaining,
            percent_used=obj.percent_used,
            by_category=obj.by_category,
            status=obj.status,
            categories=[CategorySpendingSchema(**row) for row in categories],
        )
