"""Trigger rules and flagged issues."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TriggerRule:
    """Pairs a food category with a symptom and the thresholds to flag it."""

    id: str
    trigger_food_category: str
    associated_symptom: str
    cooccurrence_window_hours: float
    min_incidents_for_analysis: int
    cooccurrence_threshold: float
    flag_message: str

    def __post_init__(self) -> None:
        if self.cooccurrence_window_hours <= 0:
            raise ValueError(f"{self.id}: cooccurrence window must be positive")
        if self.min_incidents_for_analysis <= 0:
            raise ValueError(f"{self.id}: minimum incidents must be positive")
        if not 0 < self.cooccurrence_threshold <= 1:
            raise ValueError(f"{self.id}: threshold must be in (0, 1]")


@dataclass(frozen=True)
class FlaggedIssue:
    """A rule whose observed co-occurrence met its threshold."""

    food_category: str
    symptom_type: str
    correlation_strength: float
    message: str
    details: str


DEFAULT_RULES: tuple[TriggerRule, ...] = (
    TriggerRule(
        id="R001",
        trigger_food_category="Dairy",
        associated_symptom="Bloating",
        cooccurrence_window_hours=6,
        min_incidents_for_analysis=5,
        cooccurrence_threshold=0.7,
        flag_message="Possible Lactose Sensitivity (Bloating)",
    ),
    TriggerRule(
        id="R002",
        trigger_food_category="Dairy",
        associated_symptom="Gas",
        cooccurrence_window_hours=6,
        min_incidents_for_analysis=5,
        cooccurrence_threshold=0.7,
        flag_message="Possible Lactose Sensitivity (Gas)",
    ),
    TriggerRule(
        id="R003",
        trigger_food_category="Gluten",
        associated_symptom="Abdominal Pain",
        cooccurrence_window_hours=12,
        min_incidents_for_analysis=7,
        cooccurrence_threshold=0.6,
        flag_message="Potential Gluten Trigger (Abdominal Pain)",
    ),
    TriggerRule(
        id="R004",
        trigger_food_category="Spicy Foods",
        associated_symptom="Heartburn",
        cooccurrence_window_hours=4,
        min_incidents_for_analysis=5,
        cooccurrence_threshold=0.75,
        flag_message="Possible Spicy Food Sensitivity (Heartburn)",
    ),
    TriggerRule(
        id="R005",
        trigger_food_category="High-FODMAP",
        associated_symptom="Bloating",
        cooccurrence_window_hours=8,
        min_incidents_for_analysis=10,
        cooccurrence_threshold=0.65,
        flag_message="Potential FODMAP Trigger (Bloating)",
    ),
)
