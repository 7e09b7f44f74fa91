"""
Exception types raised by the collector helpers.

Automation failures (selenium's WebDriverException and friends) are not
wrapped; they reach the caller exactly as the driver raised them.
"""
from typing import Any, List, Mapping, Optional


class CollectorException(Exception):
    """Base exception for this package"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class PackagingException(CollectorException):
    """The embedded extension archive is missing from the installed package"""
    def __init__(self, resource: str, message: Optional[str] = None):
        self.resource = resource
        super().__init__(message or f"embedded resource not found: {resource}")


class ExtractionException(CollectorException):
    """Reading or writing the extracted archive failed"""
    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"failed to extract extension archive to {path}")


class ErrorRecordParseException(CollectorException):
    """A raw error record returned by the browser is malformed"""
    def __init__(
        self,
        message: str = "malformed JavaScript error record",
        raw: Any = None,
        errors: Optional[List[Mapping[str, Any]]] = None,
    ):
        self.raw = raw
        self.errors = list(errors or [])
        super().__init__(message)
