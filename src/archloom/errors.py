"""Validation error raised across the model and its configuration."""

from __future__ import annotations

import enum


class ErrorCode(enum.Enum):
    """Tag identifying which validation rule rejected a call."""

    BLANK_NAME = "blank_name"
    DUPLICATE_NAME = "duplicate_name"
    MISSING_DESTINATION = "missing_destination"
    DUPLICATE_RELATIONSHIP = "duplicate_relationship"
    BLANK_URL = "blank_url"
    INVALID_URL = "invalid_url"
    NEGATIVE_INTERVAL = "negative_interval"
    NEGATIVE_TIMEOUT = "negative_timeout"
    BLANK_HEADER_NAME = "blank_header_name"


class ValidationError(ValueError):
    """Raised when a modeling call is given invalid arguments."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
