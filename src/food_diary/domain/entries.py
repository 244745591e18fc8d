"""Domain models for diary entries."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class EntryKind(Enum):
    """Kinds of entries kept in the diary."""

    FOOD = "food"
    SYMPTOM = "symptom"


class MealType(Enum):
    """Meal a food entry belongs to."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class Severity(Enum):
    """Symptom severity levels."""

    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"


FOOD_CATEGORIES = (
    "Uncategorized",
    "Dairy",
    "Gluten",
    "Spicy Foods",
    "High-FODMAP",
)

SYMPTOM_TYPES = (
    "Bloating",
    "Gas",
    "Stomach Ache",
    "Headache",
    "Nausea",
    "Diarrhea",
    "Constipation",
    "Fatigue",
    "Skin Rash",
    "Abdominal Pain",
    "Heartburn",
    "Other",
)


@dataclass(frozen=True)
class NewFoodEntry:
    """Food entry as submitted, before the store assigns id and times."""

    food_item_name: str
    meal_type: MealType
    portion_size: float
    food_category: str = "Uncategorized"
    notes: str = ""
    occurred_at: datetime | None = None


@dataclass(frozen=True)
class NewSymptomEntry:
    """Symptom entry as submitted, before the store assigns id and times."""

    symptom_type: str
    severity: Severity
    notes: str = ""
    occurred_at: datetime | None = None


@dataclass(frozen=True)
class FoodEntry:
    """Logged food entry.

    ``timestamp`` is the onset time used for analysis: the time the user
    picked when backdating, otherwise the store write time. ``recorded_at``
    is always the write time.
    """

    id: str
    food_item_name: str
    meal_type: MealType
    portion_size: float
    notes: str
    food_category: str
    timestamp: datetime | None
    recorded_at: datetime | None = None


@dataclass(frozen=True)
class SymptomEntry:
    """Logged symptom entry with plaintext notes."""

    id: str
    symptom_type: str
    severity: Severity
    notes: str
    timestamp: datetime | None
    recorded_at: datetime | None = None


@dataclass(frozen=True)
class DailyLog:
    """Entries that fall on a single calendar day."""

    day: date
    food: list[FoodEntry]
    symptoms: list[SymptomEntry]
