"""
JSErrorCollector helpers for selenium.

Bundles the JSErrorCollector browser extension, registers it with a browser
profile and reads the JavaScript errors it collects.
"""

from loguru import logger

from .core.exceptions import (
    CollectorException,
    ErrorRecordParseException,
    ExtractionException,
    PackagingException,
)
from .extractor import XpiExtractor, get_default_extractor
from .model import JavaScriptError
from .profile import add_extension, add_extension_from_directory, install_addon
from .reader import READ_ERRORS_SCRIPT, collector_available, read_errors

__version__ = "0.6.0"

# silent until the application calls core.setup_logging()
logger.disable(__name__)

__all__ = [
    "JavaScriptError",
    "XpiExtractor",
    "get_default_extractor",
    "add_extension",
    "add_extension_from_directory",
    "install_addon",
    "read_errors",
    "collector_available",
    "READ_ERRORS_SCRIPT",
    "CollectorException",
    "PackagingException",
    "ExtractionException",
    "ErrorRecordParseException",
]
