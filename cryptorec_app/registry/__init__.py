"""Supported crypto code registry"""

from .codes import CODE_VALIDATION_CHAIN, CodeRegistry, CodeRule, normalize_code

__all__ = ["CODE_VALIDATION_CHAIN", "CodeRegistry", "CodeRule", "normalize_code"]
