"""Supabase repository for food and symptom entries."""

from dataclasses import dataclass, field
from datetime import datetime

from supabase import Client

from food_diary.domain.entries import (
    FoodEntry,
    MealType,
    NewFoodEntry,
    NewSymptomEntry,
    Severity,
    SymptomEntry,
)
from food_diary.domain.sessions import DiaryContext
from food_diary.services.entries import EntryRepository
from food_diary.services.notes import NotesCodec, PlainNotesCodec

FOOD_COLUMNS = (
    "id, food_item_name, meal_type, portion_size, notes, food_category, "
    "timestamp, recorded_at"
)
SYMPTOM_COLUMNS = "id, symptom_type, severity, notes, timestamp, recorded_at"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for diary entries.

    ``recorded_at`` is filled by the database default on insert. ``timestamp``
    is only written when the user backdated the entry; rows without it fall
    back to ``recorded_at``.
    """

    client: Client
    notes_codec: NotesCodec = field(default_factory=PlainNotesCodec)

    def create_food_entry(
        self, context: DiaryContext, entry: NewFoodEntry
    ) -> FoodEntry:
        """Create a food entry row and return it."""
        payload: dict[str, object] = {
            "app_id": context.app_id,
            "user_id": context.user_id,
            "food_item_name": entry.food_item_name,
            "meal_type": entry.meal_type.value,
            "portion_size": entry.portion_size,
            "notes": entry.notes,
            "food_category": entry.food_category,
        }
        if entry.occurred_at is not None:
            payload["timestamp"] = entry.occurred_at.isoformat()
        response = self.client.table("food_entries").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_food(response.data[0])

    def create_symptom_entry(
        self, context: DiaryContext, entry: NewSymptomEntry
    ) -> SymptomEntry:
        """Create a symptom entry row with encoded notes and return it."""
        payload: dict[str, object] = {
            "app_id": context.app_id,
            "user_id": context.user_id,
            "symptom_type": entry.symptom_type,
            "severity": entry.severity.value,
            "notes": self.notes_codec.encode(entry.notes),
        }
        if entry.occurred_at is not None:
            payload["timestamp"] = entry.occurred_at.isoformat()
        response = self.client.table("symptom_entries").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create symptom entry")
        return _parse_symptom(response.data[0], self.notes_codec)

    def list_food_entries(self, context: DiaryContext) -> list[FoodEntry]:
        """Return all food entries for a diary."""
        response = (
            self.client.table("food_entries")
            .select(FOOD_COLUMNS)
            .eq("app_id", context.app_id)
            .eq("user_id", context.user_id)
            .order("recorded_at", desc=False)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def list_symptom_entries(self, context: DiaryContext) -> list[SymptomEntry]:
        """Return all symptom entries for a diary with decoded notes."""
        response = (
            self.client.table("symptom_entries")
            .select(SYMPTOM_COLUMNS)
            .eq("app_id", context.app_id)
            .eq("user_id", context.user_id)
            .order("recorded_at", desc=False)
            .execute()
        )
        return [
            _parse_symptom(row, self.notes_codec) for row in response.data or []
        ]


def _parse_food(row: dict[str, object]) -> FoodEntry:
    recorded_at = _parse_datetime(row.get("recorded_at"))
    return FoodEntry(
        id=str(row["id"]),
        food_item_name=str(row.get("food_item_name") or ""),
        meal_type=_parse_meal_type(row.get("meal_type")),
        portion_size=float(row.get("portion_size") or 0.0),
        notes=str(row.get("notes") or ""),
        food_category=str(row.get("food_category") or "Uncategorized"),
        timestamp=_parse_datetime(row.get("timestamp")) or recorded_at,
        recorded_at=recorded_at,
    )


def _parse_symptom(row: dict[str, object], codec: NotesCodec) -> SymptomEntry:
    recorded_at = _parse_datetime(row.get("recorded_at"))
    return SymptomEntry(
        id=str(row["id"]),
        symptom_type=str(row.get("symptom_type") or ""),
        severity=_parse_severity(row.get("severity")),
        notes=codec.decode(str(row.get("notes") or "")),
        timestamp=_parse_datetime(row.get("timestamp")) or recorded_at,
        recorded_at=recorded_at,
    )


def _parse_datetime(value: object) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _parse_meal_type(value: object) -> MealType:
    try:
        return MealType(value)
    except ValueError:
        return MealType.BREAKFAST


def _parse_severity(value: object) -> Severity:
    try:
        return Severity(value)
    except ValueError:
        return Severity.MILD
