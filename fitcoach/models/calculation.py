"""
Pydantic models for calculated nutrition targets and the generate endpoint
responses.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Calculation(BaseModel):
    """Energy and macro targets derived from a single profile."""

    model_config = ConfigDict(frozen=True)

    bmr: int = Field(..., ge=0)
    tdee: int = Field(..., gt=0)
    daily_calories: int = Field(..., ge=0)
    deficit: int = Field(..., ge=0)
    deficit_percent: int = Field(..., ge=0, le=100)
    protein_g: int = Field(..., ge=0)
    fat_g: int = Field(..., ge=0)
    carbs_g: int = Field(..., ge=50)
    weekly_loss_kg: float = Field(..., ge=0)
    total_loss_kg: float = Field(..., ge=0)
    warning: Optional[str] = None


class GenerateResponse(BaseModel):
    """API response for the generate endpoint."""

    success: bool = True
    calculations: Calculation
    program: str


class ErrorResponse(BaseModel):
    """Error body shared by every failing endpoint."""

    error: str
