"""Derive the page category and item id from a URL path."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse

CHARACTERS = "characters"
UNITS = "units"
BUILDINGS = "buildings"
MODES = "modes"
GUIDES = "guides"

# Categories looked up by id; the rest always show their first item.
KEYED_CATEGORIES = frozenset({CHARACTERS, GUIDES})


@dataclass(frozen=True)
class PageContext:
    type: str | None
    id: str | None


def _strip_extension(filename: str) -> str:
    return filename.rpartition(".")[0]


def resolve_page_context(path: str) -> PageContext:
    """Return the ``PageContext`` for ``path``.

    ``path`` may be a bare path (``/characters/flame_sovereign.html``) or a
    full URL. Paths with fewer than two segments resolve to no type.
    """
    if "://" in path:
        path = urlparse(path).path
    else:
        # urlparse would read a leading "//" as a host
        path = path.split("#", 1)[0].split("?", 1)[0]
    segments = [segment for segment in path.split("/") if segment]
    if len(segments) < 2:
        return PageContext(type=None, id=None)

    page_type = segments[-2]
    filename = segments[-1]

    if page_type == CHARACTERS:
        page_id = _strip_extension(filename)
    elif "index.html" in filename:
        # category landing page: the id is the category name itself
        page_id = page_type
    elif page_type == GUIDES:
        page_id = _strip_extension(filename)
    else:
        page_id = None
    return PageContext(type=page_type, id=page_id)
