from __future__ import annotations

from datetime import date
from typing import Dict, Optional, Tuple

from app.models.domain import (
    Region,
    Season,
    SeasonalRecommendation,
    WeatherIcon,
    WeatherSummary,
)

SOUTHERN_HEMISPHERE_MARKERS = (
    "australia",
    "new zealand",
    "argentina",
    "chile",
    "south africa",
)

# Checked in order; the first region with a matching marker wins.
REGION_MARKERS: Tuple[Tuple[Region, Tuple[str, ...]], ...] = (
    (Region.europe, ("europe", "paris", "london", "rome")),
    (Region.asia, ("asia", "japan", "thailand", "india")),
    (Region.tropical, ("tropical", "caribbean", "hawaii")),
)

MONSOON_MONTHS = frozenset({6, 7, 8, 9})
TROPICAL_DRY_MONTHS = frozenset({11, 12, 1, 2, 3, 4})

_NORTHERN_SEASONS = {
    3: Season.spring, 4: Season.spring, 5: Season.spring,
    6: Season.summer, 7: Season.summer, 8: Season.summer,
    9: Season.fall, 10: Season.fall, 11: Season.fall,
    12: Season.winter, 1: Season.winter, 2: Season.winter,
}
_OPPOSITE_SEASON = {
    Season.spring: Season.fall,
    Season.summer: Season.winter,
    Season.fall: Season.spring,
    Season.winter: Season.summer,
}

SEASONAL_CONTENT: Dict[Tuple[Region, Optional[Season]], dict] = {
    (Region.europe, Season.spring): {
        "weather": ("10-18°C (50-65°F)", "Mild with occasional rain", "Moderate", WeatherIcon.cloud),
        "recommended": ("City walking tours", "Museum visits", "Garden tours", "Outdoor cafes", "Photography"),
        "avoid": ("Beach activities", "Outdoor swimming", "Heavy hiking"),
        "essentials": ("Light jacket", "Umbrella", "Comfortable walking shoes", "Layers"),
        "optional": ("Light sweater", "Scarf", "Waterproof jacket"),
        "tips": (
            "Book accommodations early as spring is popular",
            "Pack layers for changing weather",
            "Many attractions have shorter queues than summer",
        ),
        "alerts": ("Variable weather - check forecasts daily",),
    },
    (Region.europe, Season.summer): {
        "weather": ("20-28°C (68-82°F)", "Warm and generally sunny", "Low to moderate", WeatherIcon.sun),
        "recommended": ("Outdoor festivals", "Beach visits", "Hiking", "Outdoor dining", "Sightseeing"),
        "avoid": ("Indoor activities during peak hours",),
        "essentials": ("Sunscreen", "Sunglasses", "Light clothing", "Comfortable sandals"),
        "optional": ("Hat", "Light cardigan for evenings", "Swimwear"),
        "tips": (
            "Book everything well in advance - peak season",
            "Start sightseeing early to avoid crowds",
            "Stay hydrated and take breaks in shade",
        ),
        "alerts": ("Peak tourist season - expect crowds and higher prices",),
    },
    (Region.europe, Season.fall): {
        "weather": ("8-16°C (46-61°F)", "Cool with increasing rain", "Moderate to high", WeatherIcon.cloud_rain),
        "recommended": ("Museum visits", "Indoor attractions", "Food tours", "Cultural events"),
        "avoid": ("Outdoor picnics", "Beach activities"),
        "essentials": ("Warm jacket", "Waterproof shoes", "Umbrella", "Warm layers"),
        "optional": ("Gloves", "Warm hat", "Thermal underwear"),
        "tips": (
            "Great time for indoor cultural activities",
            "Fewer crowds than summer",
            "Check opening hours - some attractions have reduced schedules",
        ),
        "alerts": ("Increasing rainfall - pack waterproof gear",),
    },
    (Region.europe, Season.winter): {
        "weather": ("2-8°C (36-46°F)", "Cold with possible snow", "Low, but snow possible", WeatherIcon.snowflake),
        "recommended": ("Christmas markets", "Museums", "Indoor attractions", "Cozy cafes", "Winter festivals"),
        "avoid": ("Outdoor swimming", "Long outdoor walks", "Beach activities"),
        "essentials": ("Heavy coat", "Warm boots", "Gloves", "Warm hat", "Thermal layers"),
        "optional": ("Scarf", "Hand warmers", "Waterproof gloves"),
        "tips": (
            "Many outdoor attractions may be closed",
            "Shorter daylight hours - plan accordingly",
            "Great time for indoor cultural experiences",
        ),
        "alerts": ("Cold weather - dress warmly", "Some attractions may have limited hours"),
    },
    (Region.asia, Season.monsoon): {
        "weather": ("25-32°C (77-90°F)", "Hot and humid with heavy rain", "Very high", WeatherIcon.cloud_rain),
        "recommended": ("Indoor attractions", "Covered markets", "Temples", "Museums"),
        "avoid": ("Outdoor trekking", "Beach activities", "Street food tours"),
        "essentials": ("Waterproof jacket", "Quick-dry clothes", "Waterproof bag", "Umbrella"),
        "optional": ("Rain boots", "Waterproof phone case"),
        "tips": (
            "Plan indoor activities during heavy rain periods",
            "Book covered transportation",
            "Keep electronics in waterproof bags",
        ),
        "alerts": ("Monsoon season - expect heavy rainfall and flooding",),
    },
    (Region.tropical, Season.dry): {
        "weather": ("24-30°C (75-86°F)", "Warm and sunny", "Low", WeatherIcon.sun),
        "recommended": ("Beach activities", "Water sports", "Hiking", "Outdoor dining"),
        "avoid": ("Indoor activities during peak sun",),
        "essentials": ("Sunscreen", "Swimwear", "Light clothing", "Sandals"),
        "optional": ("Hat", "Reef-safe sunscreen", "Beach towel"),
        "tips": ("Perfect weather for outdoor activities", "Book water activities in advance"),
        "alerts": ("Peak season - book early",),
    },
    (Region.tropical, Season.wet): {
        "weather": ("24-30°C (75-86°F)", "Hot and humid with rain", "High", WeatherIcon.cloud_rain),
        "recommended": ("Indoor attractions", "Covered activities", "Spa treatments"),
        "avoid": ("Outdoor hiking", "Beach activities during storms"),
        "essentials": ("Waterproof jacket", "Quick-dry clothes", "Umbrella"),
        "optional": ("Rain boots", "Waterproof bag"),
        "tips": ("Plan flexible indoor alternatives", "Rain usually comes in short bursts"),
        "alerts": ("Wet season - expect afternoon storms",),
    },
    # General content is the same for every season; the label comes from the calendar.
    (Region.general, None): {
        "weather": ("Variable", "Check local weather forecast", "Variable", WeatherIcon.cloud),
        "recommended": ("Research local seasonal activities", "Check weather-dependent attractions"),
        "avoid": ("Plan flexible alternatives for weather changes",),
        "essentials": ("Weather-appropriate clothing", "Comfortable shoes", "Layers"),
        "optional": ("Umbrella", "Light jacket"),
        "tips": (
            "Research local weather patterns for your specific destination",
            "Pack versatile clothing for changing conditions",
            "Check local events and seasonal attractions",
        ),
        "alerts": ("Check local weather forecasts before departure",),
    },
}


def is_southern_hemisphere(destination: str) -> bool:
    lower = (destination or "").lower()
    return any(marker in lower for marker in SOUTHERN_HEMISPHERE_MARKERS)


def season_for_month(month: int, southern: bool = False) -> Season:
    season = _NORTHERN_SEASONS[month]
    return _OPPOSITE_SEASON[season] if southern else season


def region_for(destination: str) -> Region:
    lower = (destination or "").lower()
    for region, markers in REGION_MARKERS:
        if any(marker in lower for marker in markers):
            return region
    return Region.general


def _resolve(region: Region, season: Season, month: int) -> Tuple[Region, Season]:
    if region is Region.europe:
        return region, season
    if region is Region.asia and month in MONSOON_MONTHS:
        return region, Season.monsoon
    if region is Region.tropical:
        return region, Season.dry if month in TROPICAL_DRY_MONTHS else Season.wet
    return Region.general, season


def derive_seasonal_recommendation(destination: str, on_date: date) -> SeasonalRecommendation:
    """
    Seasonal weather, activity and packing advice for a destination on a date.

    Asia outside the monsoon months and unrecognised destinations both get the
    general record, labelled with the hemisphere's calendar season.
    """
    month = on_date.month
    season = season_for_month(month, southern=is_southern_hemisphere(destination))
    region, season = _resolve(region_for(destination), season, month)
    key = (region, None) if region is Region.general else (region, season)
    content = SEASONAL_CONTENT[key]
    temperature, conditions, rainfall, icon = content["weather"]
    return SeasonalRecommendation(
        region=region,
        season=season,
        weather=WeatherSummary(
            temperature=temperature,
            conditions=conditions,
            rainfall=rainfall,
            icon=icon,
        ),
        recommended_activities=list(content["recommended"]),
        avoid_activities=list(content["avoid"]),
        essential_packing=list(content["essentials"]),
        optional_packing=list(content["optional"]),
        tips=list(content["tips"]),
        alerts=list(content["alerts"]),
    )
