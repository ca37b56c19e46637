"""
Program generation route.
"""
import json
import time

from fastapi import APIRouter, HTTPException, Request

from fitcoach.core.config import settings
from fitcoach.core.limiter import limiter
from fitcoach.core.logger import logger, log_request, log_response, log_rejection, log_error
from fitcoach.models.calculation import ErrorResponse, GenerateResponse
from fitcoach.services import openai_service
from fitcoach.services.calculator import calculate
from fitcoach.services.prompt_formatter import format_inputs_for_prompt
from fitcoach.services.sanitizer import sanitize_inputs
from fitcoach.services.validator import validate_profile

router = APIRouter()

ENDPOINT = "/api/generate"

# Free text, cardio experience and gym access may be left out of the form
REQUIRED_FIELDS = (
    "age",
    "sex",
    "height_cm",
    "weight_kg",
    "target_weight_kg",
    "weeks",
    "training_level",
    "activity_level",
    "cardio_modalities",
    "days_per_week",
    "minutes_per_session",
)


async def read_json_body(request: Request) -> object:
    """
    Read and decode the request body, rejecting malformed input with a 400.

    Checks content type, declared size, streamed size, then JSON syntax.
    """
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type:
        raise HTTPException(status_code=400, detail="Content-Type must be application/json")

    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > settings.MAX_BODY_BYTES:
        raise HTTPException(status_code=400, detail="Request too large")

    # Stream the body so chunked uploads without Content-Length are capped too
    chunks = []
    total = 0
    async for chunk in request.stream():
        total += len(chunk)
        if total > settings.MAX_BODY_BYTES:
            raise HTTPException(status_code=400, detail="Request too large")
        chunks.append(chunk)
    body = b"".join(chunks)

    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
        raise HTTPException(status_code=400, detail="Invalid request body")


@router.post(
    ENDPOINT,
    response_model=GenerateResponse,
    responses={status: {"model": ErrorResponse} for status in (400, 429, 500)},
)
@limiter.limit(settings.RATE_LIMIT_GENERATE)
async def generate(request: Request):
    """
    Generate a personalized 12-week fat loss program.

    Sanitizes and validates the submitted profile, computes calorie and macro
    targets, then asks the model for the program text.
    """
    log_request(ENDPOINT)
    started = time.perf_counter()

    raw = await read_json_body(request)
    if not isinstance(raw, dict):
        raise HTTPException(status_code=400, detail="Invalid request body")

    for field in REQUIRED_FIELDS:
        if field not in raw:
            log_rejection(ENDPOINT, f"missing {field}")
            raise HTTPException(status_code=400, detail=f"Missing required field: {field}")

    profile = sanitize_inputs(raw)
    error = validate_profile(profile)
    if error:
        log_rejection(ENDPOINT, error)
        raise HTTPException(status_code=400, detail=error)

    calcs = calculate(profile)
    logger.info(
        f"Targets: {calcs.daily_calories} kcal/day, {calcs.deficit} kcal deficit"
        + (" (adjusted for safety)" if calcs.warning else "")
    )
    user_context = format_inputs_for_prompt(profile, calcs)

    try:
        program = await openai_service.generate_program(user_context)
    except Exception as e:
        log_error("Program generation", e)
        raise HTTPException(status_code=500, detail="Failed to generate program. Please try again.")

    log_response(ENDPOINT, "success", (time.perf_counter() - started) * 1000)
    return GenerateResponse(calculations=calcs, program=program)
