"""
Pydantic model for the sanitized user profile, plus the field bounds and
allowed values shared by the sanitizer and the validator.
"""
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field


Sex = Literal["male", "female"]
TrainingLevel = Literal["beginner", "intermediate", "advanced"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]
CardioExperience = Literal["none", "some", "experienced"]
Modality = Literal[
    "walking", "running", "stationary_bike", "outdoor_cycling", "swimming", "elliptical"
]

SEXES = ("male", "female")
TRAINING_LEVELS = ("beginner", "intermediate", "advanced")
ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "very_active")
CARDIO_EXPERIENCE = ("none", "some", "experienced")
MODALITIES = (
    "walking", "running", "stationary_bike", "outdoor_cycling", "swimming", "elliptical"
)

MAX_MODALITIES = 6
MAX_TEXT_LENGTH = 200

# field -> (min, max, fallback)
AGE_RANGE = (16, 80, 30)
HEIGHT_RANGE = (140, 220, 170)
WEIGHT_RANGE = (40, 300, 80)
TARGET_WEIGHT_RANGE = (40, 300, 70)
WEEKS_RANGE = (4, 24, 12)
DAYS_RANGE = (2, 7, 4)
MINUTES_RANGE = (15, 120, 45)


class Profile(BaseModel):
    """Bounded user record consumed by the calculator and prompt formatter."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "age": 30,
                "sex": "male",
                "height_cm": 180,
                "weight_kg": 90,
                "target_weight_kg": 80,
                "weeks": 10,
                "training_level": "intermediate",
                "activity_level": "moderate",
                "cardio_experience": "some",
                "cardio_modalities": ["walking", "stationary_bike"],
                "gym_access": True,
                "days_per_week": 4,
                "minutes_per_session": 45,
                "injuries": "",
                "medical": "",
                "dietary": "vegetarian",
            }
        },
    )

    # Body stats
    age: int = Field(..., ge=AGE_RANGE[0], le=AGE_RANGE[1])
    sex: Sex
    height_cm: int = Field(..., ge=HEIGHT_RANGE[0], le=HEIGHT_RANGE[1])
    weight_kg: float = Field(..., ge=WEIGHT_RANGE[0], le=WEIGHT_RANGE[1])
    target_weight_kg: float = Field(..., ge=TARGET_WEIGHT_RANGE[0], le=TARGET_WEIGHT_RANGE[1])
    weeks: int = Field(..., ge=WEEKS_RANGE[0], le=WEEKS_RANGE[1])

    # Fitness
    training_level: TrainingLevel
    activity_level: ActivityLevel
    cardio_experience: CardioExperience

    # Logistics
    cardio_modalities: tuple[Modality, ...] = Field(..., max_length=MAX_MODALITIES)
    gym_access: bool = False
    days_per_week: int = Field(..., ge=DAYS_RANGE[0], le=DAYS_RANGE[1])
    minutes_per_session: int = Field(..., ge=MINUTES_RANGE[0], le=MINUTES_RANGE[1])

    # Constraints
    injuries: str = Field("", max_length=MAX_TEXT_LENGTH)
    medical: str = Field("", max_length=MAX_TEXT_LENGTH)
    dietary: str = Field("", max_length=MAX_TEXT_LENGTH)
