"""Trigger detection over live entry feeds."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from food_diary.domain.entries import FoodEntry, SymptomEntry
from food_diary.domain.sessions import DiaryContext
from food_diary.domain.triggers import DEFAULT_RULES, FlaggedIssue, TriggerRule
from food_diary.services.correlations import analyze
from food_diary.services.feed import EntryFeed

_logger = logging.getLogger(__name__)


@dataclass
class TriggerWatch:
    """Latest analysis result for one diary, refreshed on every change."""

    context: DiaryContext
    rules: Sequence[TriggerRule]
    issues: list[FlaggedIssue] = field(default_factory=list)
    food: list[FoodEntry] = field(default_factory=list)
    symptoms: list[SymptomEntry] = field(default_factory=list)
    revision: int = 0
    _unsubscribers: list[Callable[[], None]] = field(
        default_factory=list, init=False, repr=False
    )
    closed: bool = field(default=False, init=False)

    def track(self, unsubscribe: Callable[[], None]) -> None:
        """Remember a subscription to release on close."""
        self._unsubscribers.append(unsubscribe)

    def on_food(self, entries: list[FoodEntry]) -> None:
        self.food = entries
        self._recompute()

    def on_symptoms(self, entries: list[SymptomEntry]) -> None:
        self.symptoms = entries
        self._recompute()

    def close(self) -> None:
        """Stop receiving updates."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self.closed = True

    def _recompute(self) -> None:
        self.issues = analyze(self.food, self.symptoms, self.rules)
        self.revision += 1
        _logger.debug(
            "Triggers recomputed: user_id=%s revision=%s issues=%s",
            self.context.user_id,
            self.revision,
            len(self.issues),
        )


@dataclass
class TriggerService:
    """Runs correlation analysis for a diary, on demand or continuously."""

    food_feed: EntryFeed
    symptom_feed: EntryFeed
    rules: Sequence[TriggerRule] = DEFAULT_RULES

    def current_issues(self, context: DiaryContext) -> list[FlaggedIssue]:
        """Analyse the diary's current entries once."""
        return analyze(
            self.food_feed.snapshot(context),
            self.symptom_feed.snapshot(context),
            self.rules,
        )

    def watch(self, context: DiaryContext) -> TriggerWatch:
        """Subscribe to both feeds and keep the latest issues up to date."""
        watch = TriggerWatch(context=context, rules=self.rules)
        try:
            watch.track(self.food_feed.subscribe(context, watch.on_food))
            watch.track(self.symptom_feed.subscribe(context, watch.on_symptoms))
        except Exception:
            watch.close()
            raise
        return watch
