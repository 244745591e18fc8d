"""Domain models for diary sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiaryContext:
    """Identifies whose diary an operation acts on."""

    app_id: str
    user_id: str
