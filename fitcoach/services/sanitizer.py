"""
Boundary sanitation - turns an untrusted request body into a bounded Profile.

Every field falls back to a documented default rather than failing, so the
result is always a valid Profile whatever the caller sent.
"""
import math
from typing import Any, Mapping

from fitcoach.core.rounding import round_half_away
from fitcoach.models.profile import (
    ACTIVITY_LEVELS,
    AGE_RANGE,
    CARDIO_EXPERIENCE,
    DAYS_RANGE,
    HEIGHT_RANGE,
    MAX_MODALITIES,
    MAX_TEXT_LENGTH,
    MINUTES_RANGE,
    MODALITIES,
    SEXES,
    TARGET_WEIGHT_RANGE,
    TRAINING_LEVELS,
    WEEKS_RANGE,
    WEIGHT_RANGE,
    Profile,
)

DEFAULT_MODALITIES = ("walking",)


def _to_number(value: Any) -> float | None:
    # bool is an int subclass but never a meaningful measurement
    if isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        num = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    return num if math.isfinite(num) else None


def sanitize_number(value: Any, bounds: tuple[float, float, float]) -> float:
    """
    Coerce a value to a number clamped into [min, max].

    Args:
        value: Raw input value
        bounds: (min, max, fallback) for the field

    Returns:
        The clamped number, or the fallback when value is not a finite number
    """
    low, high, fallback = bounds
    num = _to_number(value)
    if num is None:
        return fallback
    return min(max(num, low), high)


def sanitize_int(value: Any, bounds: tuple[int, int, int]) -> int:
    """Same as sanitize_number, rounded to a whole number."""
    return round_half_away(sanitize_number(value, bounds))


def sanitize_choice(value: Any, allowed: tuple[str, ...], default: str) -> str:
    """Pass value through only if it is exactly one of the allowed strings."""
    if isinstance(value, str) and value in allowed:
        return value
    return default


def sanitize_string(value: Any, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Truncate, drop angle brackets and trim free text. Non-strings become ''."""
    if not isinstance(value, str):
        return ""
    return value[:max_length].replace("<", "").replace(">", "").strip()


def sanitize_modalities(value: Any) -> tuple[str, ...]:
    """Keep recognized, unique cardio modalities in order, at most six."""
    if not isinstance(value, (list, tuple)):
        return DEFAULT_MODALITIES

    kept: list[str] = []
    for item in value:
        if isinstance(item, str) and item in MODALITIES and item not in kept:
            kept.append(item)

    return tuple(kept[:MAX_MODALITIES]) or DEFAULT_MODALITIES


def sanitize_inputs(raw: Any) -> Profile:
    """
    Build a Profile from an arbitrary request body.

    Never raises: unknown or malformed values are replaced by per-field
    defaults and numbers are clamped into range. A non-mapping body is
    treated as empty.

    Args:
        raw: Parsed request body

    Returns:
        Sanitized Profile
    """
    if not isinstance(raw, Mapping):
        raw = {}

    return Profile(
        age=sanitize_int(raw.get("age"), AGE_RANGE),
        sex=sanitize_choice(raw.get("sex"), SEXES, "male"),
        height_cm=sanitize_int(raw.get("height_cm"), HEIGHT_RANGE),
        weight_kg=float(sanitize_number(raw.get("weight_kg"), WEIGHT_RANGE)),
        target_weight_kg=float(sanitize_number(raw.get("target_weight_kg"), TARGET_WEIGHT_RANGE)),
        weeks=sanitize_int(raw.get("weeks"), WEEKS_RANGE),
        training_level=sanitize_choice(raw.get("training_level"), TRAINING_LEVELS, "beginner"),
        activity_level=sanitize_choice(raw.get("activity_level"), ACTIVITY_LEVELS, "sedentary"),
        cardio_experience=sanitize_choice(raw.get("cardio_experience"), CARDIO_EXPERIENCE, "none"),
        cardio_modalities=sanitize_modalities(raw.get("cardio_modalities")),
        gym_access=raw.get("gym_access") is True,
        days_per_week=sanitize_int(raw.get("days_per_week"), DAYS_RANGE),
        minutes_per_session=sanitize_int(raw.get("minutes_per_session"), MINUTES_RANGE),
        injuries=sanitize_string(raw.get("injuries")),
        medical=sanitize_string(raw.get("medical")),
        dietary=sanitize_string(raw.get("dietary")),
    )
