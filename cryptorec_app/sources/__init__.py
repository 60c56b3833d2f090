"""Crypto prices file sources"""

from .folder import FolderScanner

__all__ = ["FolderScanner"]
