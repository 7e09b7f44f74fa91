"""
Configuration for the collector helpers.
Managed with pydantic-settings; every value can be overridden through
JSERRORCOLLECTOR_* environment variables or a `.env` file.
"""
import tempfile

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings"""

    # Extension archive
    XPI_FILENAME: str = "JSErrorCollector.xpi"  # name of the extracted file
    XPI_RESOURCE: str = "JSErrorCollector.xpi"  # name inside jserrorcollector.resources

    # Where the archive is extracted; defaults to the system temp dir
    TEMP_DIR: str = tempfile.gettempdir()

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: str = ""  # empty means console only

    class Config:
        env_prefix = "JSERRORCOLLECTOR_"
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
