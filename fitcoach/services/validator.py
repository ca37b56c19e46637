"""
Profile validation - rejects combinations the sanitizer cannot repair.

Checks run in a fixed order and the first failure wins: body stats, target
against current weight, timeframe, training selections, cardio modalities,
then schedule.
"""
from typing import Optional

from fitcoach.models.profile import (
    ACTIVITY_LEVELS,
    AGE_RANGE,
    CARDIO_EXPERIENCE,
    DAYS_RANGE,
    HEIGHT_RANGE,
    MINUTES_RANGE,
    SEXES,
    TARGET_WEIGHT_RANGE,
    TRAINING_LEVELS,
    WEEKS_RANGE,
    WEIGHT_RANGE,
    Profile,
)


def _within(value: float, bounds: tuple) -> bool:
    return bounds[0] <= value <= bounds[1]


def validate_profile(profile: Profile) -> Optional[str]:
    """
    Check a sanitized profile for logical consistency.

    Args:
        profile: Sanitized profile

    Returns:
        None if the profile is valid, otherwise the first error message
    """
    # Body stats
    if not _within(profile.age, AGE_RANGE):
        return "Please enter a valid age (16-80)"
    if profile.sex not in SEXES:
        return "Please select your sex"
    if not _within(profile.height_cm, HEIGHT_RANGE):
        return "Please enter a valid height"
    if profile.weight_kg < WEIGHT_RANGE[0]:
        return "Please enter your current weight"
    if profile.target_weight_kg < TARGET_WEIGHT_RANGE[0]:
        return "Please enter your target weight"
    if profile.target_weight_kg >= profile.weight_kg:
        return "Target weight should be less than current weight"
    if not _within(profile.weeks, WEEKS_RANGE):
        return "Please enter a timeframe between 4-24 weeks"

    # Training
    if profile.training_level not in TRAINING_LEVELS:
        return "Please select your training level"
    if profile.activity_level not in ACTIVITY_LEVELS:
        return "Please select your activity level"
    if profile.cardio_experience not in CARDIO_EXPERIENCE:
        return "Please select your cardio experience"

    # Logistics
    if not profile.cardio_modalities:
        return "Please select at least one cardio option"
    if not _within(profile.days_per_week, DAYS_RANGE):
        return "Please enter days per week (2-7)"
    if profile.minutes_per_session < MINUTES_RANGE[0]:
        return "Please enter session duration (min 15 minutes)"

    return None
