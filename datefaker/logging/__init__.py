"""
Logging configuration and utilities for datefaker.
"""
from .config import configure_logging, get_generation_logger, get_logger, log_generation

__all__ = ["configure_logging", "get_generation_logger", "get_logger", "log_generation"]
