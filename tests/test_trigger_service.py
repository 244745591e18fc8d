"""Tests for trigger watches and diary sessions."""

from dataclasses import dataclass
from datetime import timedelta

import pytest

from food_diary.domain.entries import (
    EntryKind,
    MealType,
    NewFoodEntry,
    NewSymptomEntry,
    Severity,
)
from food_diary.domain.sessions import DiaryContext
from food_diary.services.feed import EntryFeed
from food_diary.services.sessions import DiarySessionManager
from food_diary.services.triggers import TriggerService
from tests.conftest import BASE_TIME, InMemoryEntryRepository


def _log_dairy_with_bloating(
    food_feed: EntryFeed, symptom_feed: EntryFeed, context, hours: list[int]
) -> None:
    for hour in hours:
        eaten = BASE_TIME + timedelta(hours=hour)
        food_feed.append(
            context,
            NewFoodEntry(
                food_item_name="Yogurt",
                meal_type=MealType.SNACK,
                portion_size=150,
                food_category="Dairy",
                occurred_at=eaten,
            ),
        )
        symptom_feed.append(
            context,
            NewSymptomEntry(
                symptom_type="Bloating",
                severity=Severity.MODERATE,
                occurred_at=eaten + timedelta(hours=3),
            ),
        )


def test_current_issues_runs_one_shot_analysis(
    food_feed: EntryFeed, symptom_feed: EntryFeed, context
) -> None:
    service = TriggerService(food_feed=food_feed, symptom_feed=symptom_feed)
    _log_dairy_with_bloating(food_feed, symptom_feed, context, [0, 10, 20, 30, 40])

    issues = service.current_issues(context)

    assert [issue.message for issue in issues] == [
        "Possible Lactose Sensitivity (Bloating)"
    ]


def test_watch_recomputes_on_each_change(
    food_feed: EntryFeed, symptom_feed: EntryFeed, context
) -> None:
    service = TriggerService(food_feed=food_feed, symptom_feed=symptom_feed)
    watch = service.watch(context)

    _log_dairy_with_bloating(food_feed, symptom_feed, context, [0, 10, 20, 30])
    assert watch.issues == []

    _log_dairy_with_bloating(food_feed, symptom_feed, context, [40])

    assert len(watch.issues) == 1
    assert watch.issues[0].correlation_strength == 1.0
    # two initial deliveries plus one per append
    assert watch.revision == 2 + 10


def test_closed_watch_stops_updating(
    food_feed: EntryFeed, symptom_feed: EntryFeed, context
) -> None:
    service = TriggerService(food_feed=food_feed, symptom_feed=symptom_feed)
    watch = service.watch(context)

    watch.close()
    _log_dairy_with_bloating(food_feed, symptom_feed, context, [0, 10, 20, 30, 40])

    assert watch.closed
    assert watch.issues == []
    assert food_feed.subscriber_count(context) == 0
    assert symptom_feed.subscriber_count(context) == 0


def test_session_manager_reuses_open_sessions(
    food_feed: EntryFeed, symptom_feed: EntryFeed
) -> None:
    manager = DiarySessionManager(
        trigger_service=TriggerService(food_feed=food_feed, symptom_feed=symptom_feed),
        app_id="test-app",
    )
    context = manager.context_for("user-9")

    first = manager.open(context)
    second = manager.open(context)

    assert first is second
    assert manager.get(context) is first
    assert food_feed.subscriber_count(context) == 1


def test_session_manager_close_all_releases_subscriptions(
    food_feed: EntryFeed, symptom_feed: EntryFeed
) -> None:
    manager = DiarySessionManager(
        trigger_service=TriggerService(food_feed=food_feed, symptom_feed=symptom_feed),
        app_id="test-app",
    )
    contexts = [manager.context_for(user) for user in ("a", "b")]
    watches = [manager.open(context) for context in contexts]

    manager.close_all()

    assert all(watch.closed for watch in watches)
    assert manager.get(contexts[0]) is None
    assert symptom_feed.subscriber_count(contexts[1]) == 0


@dataclass
class FailingSymptomRepository(InMemoryEntryRepository):
    """Repository whose symptom reads fail."""

    def list_symptom_entries(self, context: DiaryContext) -> list:
        raise RuntimeError("store unavailable")


def test_failed_watch_releases_food_subscription(context) -> None:
    repository = FailingSymptomRepository()
    food_feed = EntryFeed(EntryKind.FOOD, repository)
    symptom_feed = EntryFeed(EntryKind.SYMPTOM, repository)
    service = TriggerService(food_feed=food_feed, symptom_feed=symptom_feed)

    with pytest.raises(RuntimeError):
        service.watch(context)

    assert food_feed.subscriber_count(context) == 0
    assert symptom_feed.subscriber_count(context) == 0
