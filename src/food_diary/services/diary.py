"""Diary logging and daily views."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import TypeVar
from zoneinfo import ZoneInfo

from food_diary.domain.entries import (
    DailyLog,
    FoodEntry,
    NewFoodEntry,
    NewSymptomEntry,
    SymptomEntry,
)
from food_diary.domain.sessions import DiaryContext
from food_diary.services.feed import EntryFeed

EntryT = TypeVar("EntryT", FoodEntry, SymptomEntry)


@dataclass
class DiaryService:
    """Service for logging entries and reading them back by day."""

    food_feed: EntryFeed
    symptom_feed: EntryFeed

    def log_food(self, context: DiaryContext, entry: NewFoodEntry) -> FoodEntry:
        """Persist a food entry."""
        return self.food_feed.append(context, entry)

    def log_symptom(
        self, context: DiaryContext, entry: NewSymptomEntry
    ) -> SymptomEntry:
        """Persist a symptom entry."""
        return self.symptom_feed.append(context, entry)

    def get_daily_log(
        self, context: DiaryContext, day: date, timezone_name: str
    ) -> DailyLog:
        """Return the day's entries in the given timezone, oldest first."""
        tz = ZoneInfo(timezone_name)
        return DailyLog(
            day=day,
            food=_on_day(self.food_feed.snapshot(context), day, tz),
            symptoms=_on_day(self.symptom_feed.snapshot(context), day, tz),
        )


def _on_day(entries: Sequence[EntryT], day: date, tz: ZoneInfo) -> list[EntryT]:
    dated: list[tuple[datetime, EntryT]] = []
    for entry in entries:
        if entry.timestamp is None:
            continue
        timestamp = entry.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=UTC)
        if timestamp.astimezone(tz).date() == day:
            dated.append((timestamp, entry))
    dated.sort(key=lambda pair: pair[0])
    return [entry for _, entry in dated]
