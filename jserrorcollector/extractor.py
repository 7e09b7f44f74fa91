"""
Extracts the bundled JSErrorCollector.xpi to the temp directory.

The file is only written when it is missing or its bytes differ from the
packaged archive, so repeated runs (and concurrent processes) leave an
identical file untouched.
"""
from __future__ import annotations

import threading
from importlib import resources
from pathlib import Path
from typing import Optional

from loguru import logger

from .core.config import settings
from .core.exceptions import ExtractionException, PackagingException

RESOURCE_PACKAGE = "jserrorcollector.resources"


class XpiExtractor:
    """Owns the on-disk location of the extension archive"""

    def __init__(
        self,
        temp_dir: Optional[str | Path] = None,
        filename: Optional[str] = None,
        resource: Optional[str] = None,
    ):
        self.temp_dir = Path(temp_dir or settings.TEMP_DIR)
        self.filename = filename or settings.XPI_FILENAME
        self.resource = resource or settings.XPI_RESOURCE
        self._embedded: Optional[bytes] = None
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self.temp_dir / self.filename

    def read_embedded(self) -> bytes:
        """Bytes of the packaged archive"""
        try:
            return resources.files(RESOURCE_PACKAGE).joinpath(self.resource).read_bytes()
        except (FileNotFoundError, ModuleNotFoundError) as e:
            raise PackagingException(f"{RESOURCE_PACKAGE}/{self.resource}") from e

    def is_current(self, data: Optional[bytes] = None) -> bool:
        """True if the file on disk matches the packaged archive byte for byte"""
        if data is None:
            data = self.read_embedded()
        target = self.path
        if not target.is_file():
            return False
        try:
            return target.read_bytes() == data
        except OSError as e:
            raise ExtractionException(str(target), f"cannot read {target}: {e}") from e

    def extract(self) -> Path:
        """
        Make sure the archive exists at `path` and return that path.

        The file on disk is compared with the packaged bytes on every call, so a
        corrupted or truncated file is rewritten before it is handed out.
        """
        with self._lock:
            if self._embedded is None:
                self._embedded = self.read_embedded()
            data = self._embedded
            target = self.path
            if self.is_current(data):
                logger.debug(f"[JSErrorCollector] {target} is up to date, skipping write")
            else:
                self._write(data, target)
                logger.info(f"[JSErrorCollector] extracted extension to {target}")
            return target

    @staticmethod
    def _write(data: bytes, target: Path) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "wb") as f:
                f.write(data)
        except OSError as e:
            raise ExtractionException(str(target), f"cannot write {target}: {e}") from e


_default_extractor: Optional[XpiExtractor] = None
_default_lock = threading.Lock()


def get_default_extractor() -> XpiExtractor:
    """Process-wide extractor used by the convenience functions"""
    global _default_extractor
    with _default_lock:
        if _default_extractor is None:
            _default_extractor = XpiExtractor()
        return _default_extractor
