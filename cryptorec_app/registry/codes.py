"""
Supported crypto code registry.

Codes are normalized (trimmed, upper case) before every lookup. Registration
runs CODE_VALIDATION_CHAIN in order and rejects the code at the first
failing rule, so a duplicate long code reports the duplicate, not the length.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from ..data.models import AssetCode
from ..errors import CodeTooLong, DuplicateCode, InvalidCodeFormat, RegistrationError, UnknownCode
from ..logging.config import get_logger
from ..persistence.base import CodeRepository

MAX_CODE_LENGTH = 5

_ALPHABETIC_RE = re.compile(r"[a-zA-Z]+")

logger = get_logger(__name__)


def normalize_code(code: str) -> str:
    """Trim and upper-case a crypto code."""
    return code.strip().upper()


@dataclass(frozen=True)
class CodeRule:
    """One registration rule: the code is rejected when `violated` is true."""
    name: str
    violated: Callable[[str, CodeRepository], bool]
    error: Callable[[str], RegistrationError]


CODE_VALIDATION_CHAIN: tuple[CodeRule, ...] = (
    CodeRule(
        name="duplicate",
        violated=lambda code, repository: repository.exists_by_code(code),
        error=DuplicateCode,
    ),
    CodeRule(
        name="length",
        violated=lambda code, repository: len(code) > MAX_CODE_LENGTH,
        error=CodeTooLong,
    ),
    CodeRule(
        name="format",
        violated=lambda code, repository: not _ALPHABETIC_RE.fullmatch(code),
        error=InvalidCodeFormat,
    ),
)


class CodeRegistry:
    """Existence checks and validated registration of crypto codes."""

    def __init__(self, repository: CodeRepository,
                 rules: tuple[CodeRule, ...] = CODE_VALIDATION_CHAIN):
        self.repository = repository
        self.rules = rules

    def exists(self, code: str) -> bool:
        return self.repository.exists_by_code(normalize_code(code))

    def all(self) -> list[AssetCode]:
        return self.repository.find_all()

    def require(self, code: str) -> str:
        """
        Normalize a code and check it is supported.

        Raises:
            UnknownCode: If the code is not registered
        """
        code = normalize_code(code)
        if not self.repository.exists_by_code(code):
            raise UnknownCode(code)
        return code

    def validate(self, code: Optional[str]) -> str:
        """
        Run the registration rules in order.

        Returns:
            The normalized code

        Raises:
            RegistrationError: From the first failing rule
        """
        if code is None:
            raise InvalidCodeFormat()
        code = normalize_code(code)
        for rule in self.rules:
            if rule.violated(code, self.repository):
                logger.info("Code registration rejected", code=code, rule=rule.name)
                raise rule.error(code)
        return code

    def register(self, code: Optional[str]) -> AssetCode:
        """Validate and store a new crypto code."""
        return self.repository.save(self.validate(code))
