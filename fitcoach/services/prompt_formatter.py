"""
Renders a profile and its calculation into the user context handed to the
program generator.
"""
from fitcoach.models.calculation import Calculation
from fitcoach.models.profile import Profile


def _kg(value: float) -> str:
    return f"{value:g}kg"


def format_inputs_for_prompt(profile: Profile, calc: Calculation) -> str:
    """
    Build the fixed-layout prompt block.

    Sections: USER PROFILE, PRE-CALCULATED numbers, and a SAFETY NOTE line
    only when the calculation carries a warning.
    """
    lines = [
        "USER PROFILE:",
        f"- {profile.age}yo {profile.sex}, {profile.height_cm}cm, "
        f"{_kg(profile.weight_kg)} -> {_kg(profile.target_weight_kg)} goal",
        f"- Timeline: {profile.weeks} weeks",
        f"- Training: {profile.training_level}, Activity: {profile.activity_level}",
        f"- Cardio experience: {profile.cardio_experience}",
        f"- Available cardio: {', '.join(profile.cardio_modalities)}",
        f"- Gym access: {'Yes' if profile.gym_access else 'No'}",
        f"- Schedule: {profile.days_per_week} days/week, {profile.minutes_per_session} min/session",
        f"- Injuries: {profile.injuries or 'None'}",
        f"- Medical: {profile.medical or 'None'}",
        f"- Dietary: {profile.dietary or 'None'}",
        "",
        "PRE-CALCULATED (use these exact numbers):",
        f"- BMR: {calc.bmr} kcal",
        f"- TDEE: {calc.tdee} kcal",
        f"- Daily target: {calc.daily_calories} kcal ({calc.deficit_percent}% deficit)",
        f"- Macros: {calc.protein_g}g protein, {calc.carbs_g}g carbs, {calc.fat_g}g fat",
        f"- Expected loss: ~{calc.weekly_loss_kg:.2f}kg/week",
    ]

    if calc.warning:
        lines += ["", f"SAFETY NOTE: {calc.warning}"]

    return "\n".join(lines).strip()
