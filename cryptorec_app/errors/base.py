"""
Root of the error hierarchy.

Every error raised by the engine carries a fixed, human-readable message that
is returned to the caller as-is.
"""

from typing import Optional, Dict, Any


class RecommendationError(Exception):
    """Base class for user-facing errors of the recommendation engine."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = True
