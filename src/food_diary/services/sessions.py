"""Per-user diary sessions."""

import logging
from dataclasses import dataclass, field

from food_diary.domain.sessions import DiaryContext
from food_diary.services.triggers import TriggerService, TriggerWatch

_logger = logging.getLogger(__name__)


@dataclass
class DiarySessionManager:
    """Owns the open trigger watches, one per diary."""

    trigger_service: TriggerService
    app_id: str
    _watches: dict[DiaryContext, TriggerWatch] = field(
        default_factory=dict, init=False, repr=False
    )

    def context_for(self, user_id: str) -> DiaryContext:
        """Return the diary context for a user of this app."""
        return DiaryContext(app_id=self.app_id, user_id=user_id)

    def open(self, context: DiaryContext) -> TriggerWatch:
        """Return the diary's watch, starting one if needed."""
        watch = self._watches.get(context)
        if watch is None:
            watch = self.trigger_service.watch(context)
            self._watches[context] = watch
            _logger.info("Diary session opened: user_id=%s", context.user_id)
        return watch

    def get(self, context: DiaryContext) -> TriggerWatch | None:
        """Return the diary's watch if a session is open."""
        return self._watches.get(context)

    def close(self, context: DiaryContext) -> None:
        """Close a diary session if it is open."""
        watch = self._watches.pop(context, None)
        if watch is not None:
            watch.close()
            _logger.info("Diary session closed: user_id=%s", context.user_id)

    def close_all(self) -> None:
        """Close every open session."""
        for context in list(self._watches):
            self.close(context)
