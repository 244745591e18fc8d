"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import FastAPI, HTTPException, Request, status

from food_diary.api.schemas import FoodEntryRequest, SymptomEntryRequest
from food_diary.app_logging import configure_logging
from food_diary.containers import AppContainer
from food_diary.domain.entries import (
    FOOD_CATEGORIES,
    SYMPTOM_TYPES,
    MealType,
    Severity,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/vocabulary")
    async def vocabulary() -> dict[str, list[str]]:
        """Return the choice sets entries are built from."""
        return {
            "meal_types": [meal.value for meal in MealType],
            "severities": [level.value for level in Severity],
            "food_categories": list(FOOD_CATEGORIES),
            "symptom_types": list(SYMPTOM_TYPES),
        }

    @app.post("/users/{user_id}/food-entries", status_code=status.HTTP_201_CREATED)
    async def add_food_entry(
        user_id: str, payload: FoodEntryRequest, request: Request
    ) -> dict[str, object]:
        """Log a food entry."""
        state_container: AppContainer = request.app.state.container
        context = state_container.session_manager.context_for(user_id)
        entry = state_container.diary_service.log_food(context, payload.to_domain())
        logger.info(
            "Food entry added: user_id=%s category=%s",
            user_id,
            entry.food_category,
        )
        return {"entry": entry}

    @app.post(
        "/users/{user_id}/symptom-entries", status_code=status.HTTP_201_CREATED
    )
    async def add_symptom_entry(
        user_id: str, payload: SymptomEntryRequest, request: Request
    ) -> dict[str, object]:
        """Log a symptom entry."""
        state_container: AppContainer = request.app.state.container
        context = state_container.session_manager.context_for(user_id)
        entry = state_container.diary_service.log_symptom(
            context, payload.to_domain()
        )
        logger.info(
            "Symptom entry added: user_id=%s symptom=%s",
            user_id,
            entry.symptom_type,
        )
        return {"entry": entry}

    @app.get("/users/{user_id}/log")
    async def daily_log(
        user_id: str,
        request: Request,
        day: date | None = None,
        tz: str | None = None,
    ) -> dict[str, object]:
        """Return the entries logged on a day."""
        state_container: AppContainer = request.app.state.container
        timezone_name = tz or state_container.settings.default_timezone
        if not _is_valid_timezone(timezone_name):
            raise HTTPException(
                status_code=422,
                detail=f"Unknown timezone: {timezone_name}",
            )
        context = state_container.session_manager.context_for(user_id)
        resolved_day = day or _today(timezone_name)
        log = state_container.diary_service.get_daily_log(
            context, resolved_day, timezone_name
        )
        return {
            "day": log.day,
            "timezone": timezone_name,
            "food": log.food,
            "symptoms": log.symptoms,
        }

    @app.get("/users/{user_id}/triggers")
    async def triggers(user_id: str, request: Request) -> dict[str, object]:
        """Return the possible triggers flagged for a user."""
        state_container: AppContainer = request.app.state.container
        context = state_container.session_manager.context_for(user_id)
        issues = state_container.trigger_service.current_issues(context)
        return {"issues": issues}

    return app


def _today(timezone_name: str) -> date:
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


def _is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True
