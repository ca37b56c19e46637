"""
Nutrition target calculator.

1. BMR  (Mifflin-St Jeor)
2. TDEE (activity multiplier)
3. Requested deficit from the goal weight and timeline
4. Safety caps: absolute deficit ceiling, 25% of TDEE, sex-based calorie floor
5. Macros: protein from target weight, fat from current weight, carbs remainder
"""
from fitcoach.core.rounding import round_half_away
from fitcoach.models.calculation import Calculation
from fitcoach.models.profile import Profile

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

KCAL_PER_KG = 7700  # ~1 kg of body fat

ABSOLUTE_MAX_DEFICIT = 1000
ADJUSTED_DEFICIT = 750  # ~0.75 kg/week
MAX_DEFICIT_FRACTION = 0.25
MIN_CALORIES = {"male": 1500, "female": 1200}

PROTEIN_G_PER_KG_TARGET = 2.0
FAT_G_PER_KG_CURRENT = 0.8
MIN_CARBS_G = 50


def bmr(profile: Profile) -> float:
    """Mifflin-St Jeor resting energy expenditure (kcal/day)."""
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    return base + (5 if profile.sex == "male" else -161)


def tdee(profile: Profile) -> int:
    """Total daily energy expenditure, rounded to whole kcal."""
    return round_half_away(bmr(profile) * ACTIVITY_MULTIPLIERS[profile.activity_level])


def capped_deficit(requested: float, tdee_kcal: int, weekly_loss: float) -> tuple[float, str | None]:
    """
    Apply the deficit caps, first match wins.

    Returns:
        (daily deficit, warning or None)
    """
    if requested > ABSOLUTE_MAX_DEFICIT:
        return ADJUSTED_DEFICIT, (
            f"Your goal requires losing {weekly_loss:.1f}kg/week, which is too aggressive. "
            "I've adjusted to a safer ~0.75kg/week target. "
            "Sustainable progress beats fast burnout."
        )

    max_deficit = tdee_kcal * MAX_DEFICIT_FRACTION
    if requested > max_deficit:
        return max_deficit, (
            "Your goal is ambitious. I've capped the deficit at 25% of your TDEE "
            "to protect muscle and energy levels."
        )

    return requested, None


def calculate(profile: Profile) -> Calculation:
    """
    Compute calorie and macro targets for a validated profile.

    Pure and deterministic. Only one warning is reported; the calorie floor
    warning replaces a deficit-cap warning when both apply.

    Args:
        profile: Validated profile (target weight below current weight)

    Returns:
        Calculation with post-cap, post-floor targets
    """
    tdee_kcal = tdee(profile)

    total_loss = profile.weight_kg - profile.target_weight_kg
    weekly_loss_requested = total_loss / profile.weeks
    requested_deficit = weekly_loss_requested * KCAL_PER_KG / 7

    deficit, warning = capped_deficit(requested_deficit, tdee_kcal, weekly_loss_requested)
    daily_calories = round_half_away(tdee_kcal - deficit)

    min_calories = MIN_CALORIES[profile.sex]
    final_calories = max(daily_calories, min_calories)
    if final_calories > daily_calories:
        warning = (
            f"To keep you healthy and energized, I've set a minimum of {min_calories} kcal/day. "
            "Going lower risks muscle loss and metabolic adaptation."
        )

    protein_g = round_half_away(profile.target_weight_kg * PROTEIN_G_PER_KG_TARGET)
    fat_g = round_half_away(profile.weight_kg * FAT_G_PER_KG_CURRENT)
    carb_kcal = final_calories - protein_g * 4 - fat_g * 9
    # the carb floor may push total macro kcal above final_calories
    carbs_g = max(round_half_away(carb_kcal / 4), MIN_CARBS_G)

    # the floor can lift intake above TDEE; report that as no deficit
    actual_deficit = max(tdee_kcal - final_calories, 0)

    return Calculation(
        bmr=round_half_away(bmr(profile)),
        tdee=tdee_kcal,
        daily_calories=final_calories,
        deficit=actual_deficit,
        deficit_percent=round_half_away(actual_deficit / tdee_kcal * 100),
        protein_g=protein_g,
        fat_g=fat_g,
        carbs_g=carbs_g,
        weekly_loss_kg=actual_deficit * 7 / KCAL_PER_KG,
        total_loss_kg=total_loss,
        warning=warning,
    )
