"""Entry store interface."""

from typing import Protocol

from food_diary.domain.entries import (
    FoodEntry,
    NewFoodEntry,
    NewSymptomEntry,
    SymptomEntry,
)
from food_diary.domain.sessions import DiaryContext


class EntryRepository(Protocol):
    """Persistence interface for food and symptom entries."""

    def create_food_entry(
        self, context: DiaryContext, entry: NewFoodEntry
    ) -> FoodEntry:
        """Persist a food entry and return it with id and timestamps."""

    def create_symptom_entry(
        self, context: DiaryContext, entry: NewSymptomEntry
    ) -> SymptomEntry:
        """Persist a symptom entry and return it with id and timestamps."""

    def list_food_entries(self, context: DiaryContext) -> list[FoodEntry]:
        """Return all food entries for a diary."""

    def list_symptom_entries(self, context: DiaryContext) -> list[SymptomEntry]:
        """Return all symptom entries for a diary."""
