"""
Logging for the FitCoach service: one stdout handler, and small helpers
so every route logs requests, rejections and AI calls the same way.
"""
import logging
import sys

from fitcoach.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _stdout_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger(name: str = "fitcoach", level: str = settings.LOG_LEVEL) -> logging.Logger:
    """
    Return the named logger with a stdout handler attached once.

    Unknown level names fall back to INFO.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        logger.addHandler(_stdout_handler())

    return logger


logger = setup_logger()


def log_request(endpoint: str, method: str = "POST") -> None:
    logger.info(f"Request: {method} {endpoint}")


def log_response(endpoint: str, status: str, duration_ms: float = None) -> None:
    suffix = f" ({duration_ms:.0f}ms)" if duration_ms else ""
    logger.info(f"Response: {endpoint} -> {status}{suffix}")


def log_rejection(endpoint: str, reason: str) -> None:
    """Log a request turned away before reaching the generator."""
    logger.warning(f"Rejected: {endpoint} -> {reason}")


def log_error(context: str, error: Exception) -> None:
    logger.error(f"Error in {context}: {type(error).__name__}: {error}")


def log_ai_call(operation: str, model: str) -> None:
    logger.info(f"AI Call: {operation} using {model}")
