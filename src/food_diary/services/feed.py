"""Observable entry feeds backed by the entry store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from food_diary.domain.entries import (
    EntryKind,
    FoodEntry,
    NewFoodEntry,
    NewSymptomEntry,
    SymptomEntry,
)
from food_diary.domain.sessions import DiaryContext
from food_diary.services.entries import EntryRepository

_logger = logging.getLogger(__name__)

Entry = FoodEntry | SymptomEntry
Listener = Callable[[list[Entry]], None]
Unsubscribe = Callable[[], None]


@dataclass
class EntryFeed:
    """Delivers full entry snapshots to subscribers whenever a diary changes.

    Subscribers are called once on subscribe and again after every append
    made through this feed for the same diary.
    """

    kind: EntryKind
    repository: EntryRepository
    _listeners: dict[DiaryContext, list[Listener]] = field(
        default_factory=dict, init=False, repr=False
    )

    def append(
        self, context: DiaryContext, entry: NewFoodEntry | NewSymptomEntry
    ) -> Entry:
        """Persist an entry and notify subscribers of the diary."""
        if self.kind is EntryKind.FOOD:
            if not isinstance(entry, NewFoodEntry):
                raise TypeError("Food feed only accepts food entries")
            created: Entry = self.repository.create_food_entry(context, entry)
        else:
            if not isinstance(entry, NewSymptomEntry):
                raise TypeError("Symptom feed only accepts symptom entries")
            created = self.repository.create_symptom_entry(context, entry)
        self._notify(context)
        return created

    def snapshot(self, context: DiaryContext) -> list[Entry]:
        """Return every entry currently stored for the diary."""
        if self.kind is EntryKind.FOOD:
            return list(self.repository.list_food_entries(context))
        return list(self.repository.list_symptom_entries(context))

    def subscribe(self, context: DiaryContext, on_change: Listener) -> Unsubscribe:
        """Register a listener and return a handle that removes it."""
        entries = self.snapshot(context)
        self._listeners.setdefault(context, []).append(on_change)
        _deliver(self.kind, on_change, entries)

        def unsubscribe() -> None:
            current = self._listeners.get(context)
            if current is None or on_change not in current:
                return
            current.remove(on_change)
            if not current:
                del self._listeners[context]

        return unsubscribe

    def subscriber_count(self, context: DiaryContext) -> int:
        """Return the number of active listeners for a diary."""
        return len(self._listeners.get(context, []))

    def _notify(self, context: DiaryContext) -> None:
        listeners = list(self._listeners.get(context, []))
        if not listeners:
            return
        entries = self.snapshot(context)
        for listener in listeners:
            _deliver(self.kind, listener, entries)


def _deliver(kind: EntryKind, listener: Listener, entries: list[Entry]) -> None:
    try:
        listener(list(entries))
    except Exception:
        _logger.exception("Entry feed listener failed: kind=%s", kind.value)
