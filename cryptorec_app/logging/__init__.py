"""
Logging configuration and utilities for the crypto recommendation engine.
"""
from .config import configure_logging, get_logger, get_source_logger

__all__ = ["configure_logging", "get_logger", "get_source_logger"]
