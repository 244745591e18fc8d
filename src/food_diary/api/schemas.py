"""Pydantic models for diary API payloads."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from food_diary.domain.entries import (
    FOOD_CATEGORIES,
    SYMPTOM_TYPES,
    MealType,
    NewFoodEntry,
    NewSymptomEntry,
    Severity,
)


class FoodEntryRequest(BaseModel):
    """Food entry submitted by a client."""

    food_item_name: str = Field(..., min_length=1)
    meal_type: MealType = MealType.BREAKFAST
    portion_size: float = Field(..., gt=0)
    notes: str = ""
    food_category: str = "Uncategorized"
    occurred_at: datetime | None = None

    @field_validator("food_category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        if value not in FOOD_CATEGORIES:
            raise ValueError(f"Unknown food category: {value}")
        return value

    def to_domain(self) -> NewFoodEntry:
        return NewFoodEntry(
            food_item_name=self.food_item_name,
            meal_type=self.meal_type,
            portion_size=self.portion_size,
            food_category=self.food_category,
            notes=self.notes,
            occurred_at=self.occurred_at,
        )


class SymptomEntryRequest(BaseModel):
    """Symptom entry submitted by a client."""

    symptom_type: str = "Bloating"
    severity: Severity = Severity.MILD
    notes: str = ""
    occurred_at: datetime | None = None

    @field_validator("symptom_type")
    @classmethod
    def _known_symptom(cls, value: str) -> str:
        if value not in SYMPTOM_TYPES:
            raise ValueError(f"Unknown symptom type: {value}")
        return value

    def to_domain(self) -> NewSymptomEntry:
        return NewSymptomEntry(
            symptom_type=self.symptom_type,
            severity=self.severity,
            notes=self.notes,
            occurred_at=self.occurred_at,
        )
