"""
Environment configuration.

Settings are read from the process environment, after loading a ``.env``
file if one is found:

- ``SOULSREQ_DATA_URL``: fetch datasets from ``<url>/<dataset>.json``.
- ``SOULSREQ_DATA_DIR``: read datasets from a local directory.
- ``SOULSREQ_HTTP_TIMEOUT``: HTTP timeout in seconds (default 10).
- ``SOULSREQ_LOG_LEVEL``: logging level name (default INFO).

With neither data setting, the datasets bundled with the package are used.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .providers import (
    DatasetProvider,
    DirectoryDatasetProvider,
    HttpDatasetProvider,
    PackageDatasetProvider,
)

logger = logging.getLogger("soulsreq.config")


class Settings(BaseModel):
    """Runtime settings for dataset loading and logging."""

    data_url: str | None = Field(default=None, description="Base URL of a static dataset host")
    data_dir: Path | None = Field(default=None, description="Directory holding dataset files")
    http_timeout: float = Field(default=10.0, gt=0, description="HTTP request timeout in seconds")
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, dotenv: bool = True) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (tests).
            dotenv: Load a ``.env`` file into ``os.environ`` first.
        """
        if environ is None:
            if dotenv and not load_dotenv():
                logger.debug(".env file not found, using process environment only")
            environ = os.environ

        values: dict[str, object] = {}
        if environ.get("SOULSREQ_DATA_URL"):
            values["data_url"] = environ["SOULSREQ_DATA_URL"]
        if environ.get("SOULSREQ_DATA_DIR"):
            values["data_dir"] = Path(environ["SOULSREQ_DATA_DIR"]).expanduser().resolve()
        if environ.get("SOULSREQ_HTTP_TIMEOUT"):
            values["http_timeout"] = environ["SOULSREQ_HTTP_TIMEOUT"]
        if environ.get("SOULSREQ_LOG_LEVEL"):
            values["log_level"] = environ["SOULSREQ_LOG_LEVEL"]
        return cls(**values)

    def build_provider(self) -> DatasetProvider:
        """Pick the dataset provider these settings describe (URL, then directory, then package)."""
        if self.data_url:
            logger.debug(f"Using HTTP datasets from {self.data_url}")
            return HttpDatasetProvider(self.data_url, timeout=self.http_timeout)
        if self.data_dir:
            logger.debug(f"Using dataset directory {self.data_dir}")
            return DirectoryDatasetProvider(self.data_dir)
        return PackageDatasetProvider()
