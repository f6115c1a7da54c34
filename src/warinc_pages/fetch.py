"""Load the site's data file from a URL or a local path."""

from __future__ import annotations

import http.client
import json
import logging
import os
import urllib.error
import urllib.request
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

from pydantic import TypeAdapter, ValidationError

from warinc_pages.models import Catalog, Item

logger = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://", "file://")
_ITEM_LIST = TypeAdapter(list[Item])


class FetchError(Exception):
    """Raised internally when the data file cannot be retrieved."""


def is_url(location: str) -> bool:
    return location.startswith(_URL_SCHEMES)


def resolve_data_location(page_location: str, data_path: str) -> str:
    """Resolve ``data_path`` relative to the page at ``page_location``."""
    if is_url(page_location):
        return urljoin(page_location, data_path)
    page_dir = os.path.dirname(page_location)
    return os.path.normpath(os.path.join(page_dir, data_path))


def _read_url(url: str) -> bytes:
    try:
        with urllib.request.urlopen(url) as resp:
            status = getattr(resp, "status", 200)
            if not 200 <= status < 300:
                raise FetchError(f"HTTP Error: {status}")
            return resp.read()
    except urllib.error.HTTPError as e:
        raise FetchError(f"HTTP Error: {e.code}") from e
    except urllib.error.URLError as e:
        raise FetchError(f"URL Error: {e.reason}") from e
    except (OSError, http.client.HTTPException) as e:
        raise FetchError(f"{e.__class__.__name__}: {e}") from e


def _read_location(location: str) -> bytes:
    if is_url(location):
        return _read_url(location)
    try:
        return Path(location).read_bytes()
    except OSError as e:
        raise FetchError(str(e)) from e


def parse_catalog(data: Any) -> Catalog:
    """Build a catalog from decoded JSON, category by category.

    A category whose records do not fit the item shape is logged and dropped,
    so the other categories' pages still render.
    """
    if not isinstance(data, dict):
        raise FetchError(f"expected a JSON object, got {type(data).__name__}")
    categories: dict[str, list[Item]] = {}
    for category, records in data.items():
        try:
            categories[category] = _ITEM_LIST.validate_python(records)
        except ValidationError as e:
            logger.error("Dropping category %r: %s", category, e)
    return Catalog(categories)


def fetch_catalog(location: str) -> Catalog | None:
    """Return the parsed catalog at ``location``, or ``None`` on any failure.

    Failures are logged and never raised, so a page whose data cannot be
    loaded keeps its authored markup.
    """
    try:
        raw = _read_location(location)
        return parse_catalog(json.loads(raw.decode("utf-8")))
    except (FetchError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Unable to load data from %s: %s", location, e)
        return None
