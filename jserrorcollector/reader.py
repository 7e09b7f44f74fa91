"""
Reads the JavaScript errors collected by the extension.
"""
from __future__ import annotations

from typing import List

from loguru import logger
from selenium.webdriver.remote.webdriver import WebDriver

from .core.exceptions import ErrorRecordParseException
from .model import JavaScriptError

READ_ERRORS_SCRIPT = "return window.JSErrorCollector_errors ? window.JSErrorCollector_errors.pump() : []"
COLLECTOR_PRESENT_SCRIPT = "return !!window.JSErrorCollector_errors"


def read_errors(driver: WebDriver) -> List[JavaScriptError]:
    """
    Get the JavaScript errors that occurred since the last call.

    The collector is drained by this call, so errors are returned only once.
    Returns an empty list when the page does not expose the collector (the
    extension is missing or the page has no collector yet); use
    collector_available() to tell those cases apart.
    """
    raw_errors = driver.execute_script(READ_ERRORS_SCRIPT)
    if raw_errors is None:
        return []
    if not isinstance(raw_errors, (list, tuple)):
        raise ErrorRecordParseException(
            f"expected a list of error records, got {type(raw_errors).__name__}",
            raw=raw_errors,
        )

    errors = [JavaScriptError.from_raw(raw) for raw in raw_errors]
    if errors:
        logger.debug(f"[JSErrorCollector] drained {len(errors)} JavaScript error(s)")
    return errors


def collector_available(driver: WebDriver) -> bool:
    """True if the current page exposes window.JSErrorCollector_errors"""
    return bool(driver.execute_script(COLLECTOR_PRESENT_SCRIPT))
