"""
Tests for the nutrition target calculator.
"""
import math
import pytest
from pydantic import ValidationError

from fitcoach.core.rounding import round_half_away
from fitcoach.models.calculation import Calculation
from fitcoach.services.calculator import bmr, calculate, tdee
from fitcoach.services.sanitizer import sanitize_inputs


def make_profile(**overrides):
    raw = {
        "age": 30,
        "sex": "male",
        "height_cm": 180,
        "weight_kg": 90,
        "target_weight_kg": 80,
        "weeks": 10,
        "training_level": "beginner",
        "activity_level": "moderate",
        "cardio_experience": "none",
        "cardio_modalities": ["walking"],
        "days_per_week": 4,
        "minutes_per_session": 45,
    }
    raw.update(overrides)
    return sanitize_inputs(raw)


class TestRounding:
    """Tests for half-away-from-zero rounding."""

    def test_ties_round_away_from_zero(self):
        assert round_half_away(2.5) == 3
        assert round_half_away(2185.5) == 2186
        assert round_half_away(-2.5) == -3

    def test_non_ties(self):
        assert round_half_away(2.49) == 2
        assert round_half_away(2914.0000000000005) == 2914


class TestEnergy:
    """Tests for BMR and TDEE."""

    def test_bmr_mifflin_male(self):
        assert bmr(make_profile()) == 10 * 90 + 6.25 * 180 - 5 * 30 + 5

    def test_bmr_mifflin_female(self):
        profile = make_profile(sex="female")
        assert bmr(profile) == 10 * 90 + 6.25 * 180 - 5 * 30 - 161

    @pytest.mark.parametrize("level, multiplier", [
        ("sedentary", 1.2),
        ("light", 1.375),
        ("moderate", 1.55),
        ("active", 1.725),
        ("very_active", 1.9),
    ])
    def test_tdee_activity_multiplier(self, level, multiplier):
        profile = make_profile(activity_level=level)
        assert tdee(profile) == round_half_away(1880 * multiplier)


class TestCalculate:
    """Tests for the full calculation."""

    def test_worked_example(self):
        calc = calculate(make_profile())

        assert calc.bmr == 1880
        assert calc.tdee == 2914
        assert calc.daily_calories == 2164
        assert calc.deficit == 750
        assert calc.deficit_percent == 26
        assert calc.protein_g == 160
        assert calc.fat_g == 72
        assert calc.carbs_g == 219
        assert calc.total_loss_kg == 10
        assert math.isclose(calc.weekly_loss_kg, 750 * 7 / 7700)
        assert "too aggressive" in calc.warning

    def test_is_deterministic(self):
        profile = make_profile(weight_kg=87.3, target_weight_kg=71.9, weeks=13)
        first = calculate(profile)
        assert all(calculate(profile) == first for _ in range(5))

    def test_absolute_cap(self):
        # 7.5 kg/week requested
        calc = calculate(make_profile(weight_kg=100, target_weight_kg=70, weeks=4))

        assert calc.deficit == 750
        assert calc.daily_calories == calc.tdee - 750
        assert "too aggressive" in calc.warning
        assert "7.5kg/week" in calc.warning

    def test_quarter_tdee_cap(self):
        # 916 kcal/day requested: over 25% of 2914 but under 1000
        calc = calculate(make_profile(target_weight_kg=85, weeks=6))

        assert calc.tdee == 2914
        assert calc.daily_calories == round_half_away(2914 - 2914 * 0.25)
        assert calc.deficit == 728
        assert "25%" in calc.warning

    def test_modest_goal_has_no_warning(self):
        # 0.25 kg/week -> 275 kcal/day
        calc = calculate(make_profile(target_weight_kg=87, weeks=12))

        assert calc.warning is None
        assert calc.daily_calories == 2914 - 275
        assert calc.deficit == 275

    def test_floor_overrides_cap_warning(self):
        # small female: TDEE 1112, 25% cap leaves 834 kcal, floor lifts to 1200
        profile = make_profile(
            sex="female", age=60, height_cm=150, weight_kg=45,
            target_weight_kg=43, weeks=4, activity_level="sedentary",
        )
        calc = calculate(profile)

        assert calc.tdee == 1112
        assert calc.daily_calories == 1200
        assert "minimum of 1200 kcal/day" in calc.warning
        assert "25%" not in calc.warning

    def test_floor_above_tdee_reports_no_deficit(self):
        profile = make_profile(
            sex="female", age=60, height_cm=150, weight_kg=45,
            target_weight_kg=44, weeks=4, activity_level="sedentary",
        )
        calc = calculate(profile)

        assert calc.daily_calories == 1200
        assert calc.deficit == 0
        assert calc.deficit_percent == 0
        assert calc.weekly_loss_kg == 0

    def test_male_floor(self):
        profile = make_profile(
            age=80, height_cm=140, weight_kg=50, target_weight_kg=45,
            weeks=4, activity_level="sedentary",
        )
        calc = calculate(profile)

        assert calc.daily_calories == 1500
        assert "minimum of 1500 kcal/day" in calc.warning

    def test_carb_floor(self):
        # heavy current weight pushes fat kcal high; carbs would go negative
        profile = make_profile(
            sex="female", age=80, height_cm=140, weight_kg=300,
            target_weight_kg=250, weeks=24, activity_level="sedentary",
        )
        calc = calculate(profile)

        assert calc.daily_calories - calc.protein_g * 4 - calc.fat_g * 9 < 200
        assert calc.carbs_g == 50

    def test_weekly_loss_reflects_final_calories(self):
        calc = calculate(make_profile(weight_kg=100, target_weight_kg=70, weeks=4))
        assert math.isclose(calc.weekly_loss_kg, calc.deficit * 7 / 7700)
        assert calc.total_loss_kg == 30

    @pytest.mark.parametrize("sex", ["male", "female"])
    @pytest.mark.parametrize("level", ["sedentary", "very_active"])
    @pytest.mark.parametrize("weeks", [4, 24])
    def test_no_negative_fields(self, sex, level, weeks):
        profile = make_profile(
            sex=sex, activity_level=level, weeks=weeks,
            weight_kg=41, target_weight_kg=40, age=80, height_cm=140,
        )
        calc = calculate(profile)

        for field in ("bmr", "tdee", "daily_calories", "deficit", "deficit_percent",
                      "protein_g", "fat_g", "carbs_g", "weekly_loss_kg", "total_loss_kg"):
            assert getattr(calc, field) >= 0


class TestCalculationModel:
    """Tests for the bounds the Calculation model enforces itself."""

    VALID = dict(
        bmr=1880, tdee=2914, daily_calories=2164, deficit=750, deficit_percent=26,
        protein_g=160, fat_g=72, carbs_g=219, weekly_loss_kg=0.68, total_loss_kg=10.0,
    )

    def test_accepts_worked_example(self):
        calc = Calculation(**self.VALID)
        assert calc.deficit == 750
        assert calc.warning is None

    @pytest.mark.parametrize("field, value", [
        ("deficit", -88),
        ("deficit_percent", -8),
        ("weekly_loss_kg", -0.08),
        ("total_loss_kg", -1.0),
        ("tdee", 0),
        ("carbs_g", 49),
    ])
    def test_rejects_out_of_range_values(self, field, value):
        with pytest.raises(ValidationError):
            Calculation(**dict(self.VALID, **{field: value}))
