"""
Pytest fixtures for the FitCoach service tests.
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch, AsyncMock

# Mock environment variables before importing app
import os
os.environ.setdefault("OPENAI_API_KEY", "test-api-key")

from fitcoach.main import app
from fitcoach.core.limiter import limiter
from fitcoach.services.sanitizer import sanitize_inputs


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate-limit counters."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def sample_program():
    """Sample program text as returned by the model."""
    return (
        "## Program Overview\n"
        "Lose 10kg over 10 weeks at a steady pace.\n\n"
        "## Calories & Macros\n"
        "2164 kcal, 160g protein, 219g carbs, 72g fat.\n"
    )


@pytest.fixture
def mock_generate_program(sample_program):
    """Mock the program generator used by the route."""
    with patch(
        "fitcoach.services.openai_service.generate_program",
        new=AsyncMock(return_value=sample_program),
    ) as mock:
        yield mock


@pytest.fixture
def sample_generate_request():
    """Valid generate request body (the worked-example profile)."""
    return {
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
        "injuries": "left knee",
        "medical": "",
        "dietary": "vegetarian",
    }


@pytest.fixture
def sample_profile(sample_generate_request):
    """Sanitized profile built from the sample request."""
    return sanitize_inputs(sample_generate_request)
