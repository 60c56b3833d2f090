"""Crypto code registration errors."""

from typing import Optional

from .base import RecommendationError


class RegistrationError(RecommendationError):
    """Base class for rejected code registrations."""

    def __init__(self, message: str, code: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.code = code


class DuplicateCode(RegistrationError):
    """Code is already registered."""

    def __init__(self, code: str, **kwargs):
        super().__init__(f"The crypto code {code} already exists", code=code, **kwargs)


class CodeTooLong(RegistrationError):
    """Code has more than five characters."""

    def __init__(self, code: Optional[str] = None, **kwargs):
        super().__init__("The crypto code cannot have more than 5 characters", code=code, **kwargs)


class InvalidCodeFormat(RegistrationError):
    """Code is empty or has non-alphabetic characters."""

    def __init__(self, code: Optional[str] = None, **kwargs):
        super().__init__("The crypto code must contain only alphabetic characters", code=code, **kwargs)
