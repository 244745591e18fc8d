"""Rule-based food/symptom correlation analysis."""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from food_diary.domain.entries import FoodEntry, SymptomEntry
from food_diary.domain.triggers import DEFAULT_RULES, FlaggedIssue, TriggerRule


def analyze(
    food_entries: Sequence[FoodEntry],
    symptom_entries: Sequence[SymptomEntry],
    rules: Sequence[TriggerRule] = DEFAULT_RULES,
) -> list[FlaggedIssue]:
    """Return flagged issues for every rule whose threshold is met.

    Rules are evaluated independently and in order. A rule needs at least
    ``min_incidents_for_analysis`` entries of its food category before it is
    considered; each timestamped food entry then counts once, and counts as
    followed by the symptom when any matching symptom lands in
    ``(food time, food time + window]``.
    """
    issues: list[FlaggedIssue] = []
    for rule in rules:
        issue = _evaluate_rule(rule, food_entries, symptom_entries)
        if issue is not None:
            issues.append(issue)
    return issues


def _evaluate_rule(
    rule: TriggerRule,
    food_entries: Sequence[FoodEntry],
    symptom_entries: Sequence[SymptomEntry],
) -> FlaggedIssue | None:
    relevant_food = [
        entry
        for entry in food_entries
        if getattr(entry, "food_category", None) == rule.trigger_food_category
    ]
    if len(relevant_food) < rule.min_incidents_for_analysis:
        return None

    symptom_times = [
        timestamp
        for entry in symptom_entries
        if getattr(entry, "symptom_type", None) == rule.associated_symptom
        and (timestamp := _instant(entry)) is not None
    ]
    window = timedelta(hours=rule.cooccurrence_window_hours)

    with_symptom = 0
    food_instances = 0
    for entry in relevant_food:
        food_time = _instant(entry)
        if food_time is None:
            continue
        food_instances += 1
        window_end = food_time + window
        if any(food_time < seen <= window_end for seen in symptom_times):
            with_symptom += 1

    if food_instances == 0:
        return None

    strength = with_symptom / food_instances
    if strength < rule.cooccurrence_threshold:
        return None
    return FlaggedIssue(
        food_category=rule.trigger_food_category,
        symptom_type=rule.associated_symptom,
        correlation_strength=strength,
        message=rule.flag_message,
        details=(
            f"Occurred in {with_symptom} out of {food_instances} instances of "
            f"{rule.trigger_food_category} consumption."
        ),
    )


def _instant(entry: object) -> datetime | None:
    """Return the entry timestamp as an aware datetime, or None if unusable."""
    timestamp = getattr(entry, "timestamp", None)
    if not isinstance(timestamp, datetime):
        return None
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp
