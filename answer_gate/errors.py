from __future__ import annotations

from typing import Any, Dict, Optional


class GateError(Exception):
    """Base exception for the answer gate."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidSubmissionError(GateError):
    """A required submission field is missing or empty."""


class JudgmentUnavailableError(GateError):
    """The external judgment call failed or returned an error payload."""
