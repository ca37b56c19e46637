"""
OpenAI API service for program generation.
"""
import openai
from openai import AsyncOpenAI
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)
import logging

from fitcoach.core.config import settings
from fitcoach.core.logger import logger, log_ai_call, log_error


# Initialize OpenAI client
client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY)

# Per-call timeout: 10s to connect, 120s to receive a full 12-week program.
OPENAI_TIMEOUT = openai.Timeout(120.0, connect=10.0, read=120.0, write=10.0)

# Tenacity retry policy: 3 total attempts, exponential backoff 2s→10s
# Only retries transient errors: rate limits and connection failures
_openai_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type((openai.RateLimitError, openai.APIConnectionError)),
    before_sleep=before_sleep_log(logging.getLogger(__name__), logging.WARNING),
    reraise=True,
)


@_openai_retry
async def call_chat_api(
    system_prompt: str,
    user_prompt: str,
    temperature: float = 0.7,
    max_tokens: int = 4000
) -> str:
    """
    Call OpenAI Chat API for free-text generation.

    Retries automatically on RateLimitError / APIConnectionError
    (up to 3 attempts with exponential backoff).

    Args:
        system_prompt: System context
        user_prompt: User request
        temperature: Model temperature
        max_tokens: Generation token ceiling

    Returns:
        Generated text

    Raises:
        ValueError: If the response carries no text
        openai.RateLimitError: If all retries exhausted
    """
    log_ai_call("Chat API", settings.OPENAI_MODEL)

    messages = [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt}
    ]

    response = await client.chat.completions.create(
        model=settings.OPENAI_MODEL,
        messages=messages,
        temperature=temperature,
        max_tokens=max_tokens,
        timeout=OPENAI_TIMEOUT,  # Hard cap: stalled responses won't hang the worker
    )

    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as e:
        log_error("Chat API response shape", e)
        raise ValueError("AI returned an unexpected response")

    if not isinstance(content, str) or not content.strip():
        raise ValueError("AI returned an empty response")

    logger.info(f"Chat API call successful ({len(content)} chars)")
    return content


# --- Program Generation ---

SYSTEM_PROMPT = """You're an expert fitness coach creating personalized 12-week fat loss programs.

CALCULATIONS PROVIDED: The user data includes pre-calculated BMR, TDEE, calories, and macros. Use these exact numbers - do not recalculate.

CARDIO PLAN RULES:
- 12 weeks progressive (volume or intensity)
- Match user's available modalities ONLY
- Include: duration, intensity (RPE 1-10 or HR zone), brief coaching note
- Beginners: conservative start, walk-run progressions if running
- Format each week clearly

NUTRITION RULES (principles, not meal plans):
- High protein priority (number provided)
- High volume/low cal foods, fiber, water
- Sustainable > fast. No crash diets.

ADHERENCE SECTION:
- Hunger management strategies
- Cravings, energy dips, motivation
- Sleep importance, meal timing flexibility

OUTPUT FORMAT (use markdown headers):

## Program Overview
Brief summary: goal, approach, expected weekly loss rate.

## Calories & Macros
State the provided numbers. Explain briefly why these work.

## 12-Week Cardio Plan
Week-by-week breakdown. For each week state:
- Days and modality
- Duration and intensity
- One coaching note

Use a clear format like:
**Week 1-2**: [details]
**Week 3-4**: [details]
etc.

## Nutrition Rules
5-7 clear, actionable principles.

## Hunger & Adherence Playbook
Practical strategies organized by challenge (hunger, cravings, energy, social eating).

## Warning Signs & Adjustments
When to eat more, when to rest, signs of overtraining.

TONE: Calm, clear, encouraging, professional. No hype. No shame. No emojis.

IMPORTANT: Be specific and practical. This should feel like a real coach wrote it, not a generic template."""

USER_PROMPT_PREFIX = "Generate a complete 12-week program for this user:"


async def generate_program(user_context: str) -> str:
    """
    Generate the 12-week program text.

    Args:
        user_context: Formatted profile and pre-calculated targets

    Returns:
        Program text (markdown) exactly as returned by the model
    """
    user_prompt = f"{USER_PROMPT_PREFIX}\n\n{user_context}"

    return await call_chat_api(
        SYSTEM_PROMPT,
        user_prompt,
        temperature=settings.TEMPERATURE_PROGRAM,
        max_tokens=settings.GENERATION_MAX_TOKENS
    )
