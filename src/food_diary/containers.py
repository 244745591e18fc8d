"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_diary.adapters.supabase_entry_repository import SupabaseEntryRepository
from food_diary.config import Settings
from food_diary.domain.entries import EntryKind
from food_diary.services.diary import DiaryService
from food_diary.services.feed import EntryFeed
from food_diary.services.sessions import DiarySessionManager
from food_diary.services.triggers import TriggerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_feed: EntryFeed
    symptom_feed: EntryFeed
    diary_service: DiaryService
    trigger_service: TriggerService
    session_manager: DiarySessionManager
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    entry_repository = SupabaseEntryRepository(supabase_client)
    food_feed = EntryFeed(EntryKind.FOOD, entry_repository)
    symptom_feed = EntryFeed(EntryKind.SYMPTOM, entry_repository)
    diary_service = DiaryService(food_feed=food_feed, symptom_feed=symptom_feed)
    trigger_service = TriggerService(food_feed=food_feed, symptom_feed=symptom_feed)
    session_manager = DiarySessionManager(
        trigger_service=trigger_service, app_id=resolved_settings.app_id
    )

    async def close_resources() -> None:
        session_manager.close_all()

    return AppContainer(
        settings=resolved_settings,
        food_feed=food_feed,
        symptom_feed=symptom_feed,
        diary_service=diary_service,
        trigger_service=trigger_service,
        session_manager=session_manager,
        close_resources=close_resources,
    )
