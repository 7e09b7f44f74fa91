"""
Registers the extension with a browser profile or a running driver.
"""
from __future__ import annotations

import os
import warnings
from typing import Any, Optional, Protocol

from loguru import logger
from selenium.webdriver.firefox.webdriver import WebDriver as FirefoxDriver

from .core.config import settings
from .extractor import XpiExtractor, get_default_extractor


class SupportsAddExtension(Protocol):
    """FirefoxProfile, ChromeOptions and friends"""

    def add_extension(self, extension: str) -> Any: ...


def add_extension(profile: SupportsAddExtension, extractor: Optional[XpiExtractor] = None) -> None:
    """
    Add the error collecting extension to `profile`, which allows later use of
    read_errors(driver).

    Example:
        profile = webdriver.FirefoxProfile()
        add_extension(profile)
        options.profile = profile
        driver = webdriver.Firefox(options=options)
    """
    extractor = extractor or get_default_extractor()
    path = str(extractor.extract())
    logger.debug(f"[JSErrorCollector] registering extension {path}")
    profile.add_extension(path)


def add_extension_from_directory(profile: SupportsAddExtension, xpi_directory: str) -> None:
    """
    Deprecated: add an xpi that was staged manually in `xpi_directory`.

    The archive ships inside the package, so a directory is no longer required;
    use add_extension(profile) instead.
    """
    warnings.warn(
        "add_extension_from_directory() is deprecated: the package now includes the xpi, "
        "use add_extension(profile)",
        DeprecationWarning,
        stacklevel=2,
    )
    path = os.path.join(xpi_directory, settings.XPI_FILENAME)
    logger.warning(f"[JSErrorCollector] registering pre-staged extension {path} (deprecated entry point)")
    profile.add_extension(path)


def install_addon(driver: FirefoxDriver, extractor: Optional[XpiExtractor] = None, temporary: bool = True) -> str:
    """
    Install the extension into an already running Firefox driver.

    Current selenium releases install add-ons on the live session rather than
    through the profile. Returns the add-on id reported by geckodriver.
    """
    extractor = extractor or get_default_extractor()
    path = str(extractor.extract())
    addon_id = driver.install_addon(path, temporary=temporary)
    logger.debug(f"[JSErrorCollector] installed add-on {addon_id} from {path}")
    return addon_id
