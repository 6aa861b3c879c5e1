"""
Raw weapon dataset providers.

A provider returns the raw, game-specific records for a dataset name
(``dsr``, ``ds2``...). Where the records come from is the provider's
business: the bundled package data, a local directory of JSON/YAML
dumps, or a static HTTP host. Every failure, including an empty
dataset, is reported as ``DataUnavailableError``.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Protocol

import httpx
import yaml

from .errors import DataUnavailableError

logger = logging.getLogger("soulsreq.providers")

# Envelope keys accepted around the record array
ENVELOPE_KEYS = ("weapons", "data")


class DatasetProvider(Protocol):
    """Anything that can fetch a raw dataset by name."""

    async def fetch(self, dataset: str) -> list[dict]:
        ...


def unwrap_records(dataset: str, data: Any) -> list[dict]:
    """Extract the record array from parsed dataset content.

    Accepts a top-level array or an object wrapping the array under
    ``weapons`` or ``data``.

    Args:
        dataset: Dataset name, for error messages.
        data: Parsed JSON/YAML content.

    Returns:
        The raw record list.

    Raises:
        DataUnavailableError: If the content has no record array or it is empty.
    """
    if isinstance(data, dict):
        for key in ENVELOPE_KEYS:
            if isinstance(data.get(key), list):
                data = data[key]
                break

    if not isinstance(data, list):
        raise DataUnavailableError(
            dataset, f"expected a list of weapon records, got {type(data).__name__}"
        )
    if not data:
        raise DataUnavailableError(dataset, "dataset contains no weapon records")
    return data


class PackageDatasetProvider:
    """Reads the datasets bundled in ``soulsreq/data``."""

    def __init__(self, package: str = "soulsreq") -> None:
        self.package = package

    async def fetch(self, dataset: str) -> list[dict]:
        resource = resources.files(self.package) / "data" / f"{dataset}.json"
        try:
            raw_content = resource.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataUnavailableError(dataset, f"failed to read bundled dataset: {e}") from e

        try:
            data = json.loads(raw_content)
        except json.JSONDecodeError as e:
            raise DataUnavailableError(dataset, f"invalid JSON in bundled dataset: {e}") from e

        records = unwrap_records(dataset, data)
        logger.info("Loaded %d records for %s from package data", len(records), dataset)
        return records


class DirectoryDatasetProvider:
    """Reads ``<dataset>.json``, ``.yaml`` or ``.yml`` from a local directory."""

    SUPPORTED_EXTENSIONS = (".json", ".yaml", ".yml")

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _find(self, dataset: str) -> Path | None:
        for suffix in self.SUPPORTED_EXTENSIONS:
            candidate = self.path / f"{dataset}{suffix}"
            if candidate.is_file():
                return candidate
        return None

    async def fetch(self, dataset: str) -> list[dict]:
        file_path = self._find(dataset)
        if file_path is None:
            raise DataUnavailableError(
                dataset,
                f"no {dataset}.json or {dataset}.yaml in {self.path}",
            )

        try:
            raw_content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataUnavailableError(dataset, f"failed to read {file_path}: {e}") from e

        try:
            if file_path.suffix == ".json":
                data = json.loads(raw_content)
            else:
                data = yaml.safe_load(raw_content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise DataUnavailableError(dataset, f"failed to parse {file_path.name}: {e}") from e

        records = unwrap_records(dataset, data)
        logger.info("Loaded %d records for %s from %s", len(records), dataset, file_path)
        return records


class HttpDatasetProvider:
    """Fetches ``<base_url>/<dataset>.json`` over HTTP."""

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def url_for(self, dataset: str) -> str:
        return f"{self.base_url}/{dataset}.json"

    async def fetch(self, dataset: str) -> list[dict]:
        url = self.url_for(dataset)

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(url, timeout=self.timeout)

                if response.status_code == 404:
                    raise DataUnavailableError(dataset, f"not found at {url}")

                response.raise_for_status()

                data = response.json()

        except httpx.TimeoutException:
            logger.warning("Timed out fetching %s", url)
            raise DataUnavailableError(
                dataset, f"{self.base_url} is not responding. Try again later or use a local data directory."
            ) from None
        except httpx.HTTPStatusError as e:
            logger.warning("HTTP %s fetching %s", e.response.status_code, url)
            raise DataUnavailableError(
                dataset, f"server returned HTTP {e.response.status_code}: {e.response.reason_phrase}"
            ) from None
        except httpx.RequestError as e:
            logger.warning("Failed to connect to %s: %s", url, e)
            raise DataUnavailableError(dataset, f"failed to connect to {self.base_url}: {e}") from None
        except ValueError as e:
            raise DataUnavailableError(dataset, f"invalid JSON from {url}: {e}") from None

        records = unwrap_records(dataset, data)
        logger.info("Loaded %d records for %s from %s", len(records), dataset, url)
        return records
