"""
Core: configuration, logging and exceptions
"""
from .config import settings
from .logger import logger, reset_logging, setup_logging
from .exceptions import *

__all__ = [
    "settings",
    "logger",
    "setup_logging",
    "reset_logging",
    "CollectorException",
    "PackagingException",
    "ExtractionException",
    "ErrorRecordParseException",
]
