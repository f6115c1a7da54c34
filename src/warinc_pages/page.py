"""Fill a page shell's content container for the page at a given URL path."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from warinc_pages.context import resolve_page_context
from warinc_pages.models import Catalog
from warinc_pages.render import PageRenderer
from warinc_pages.selector import category_items, select_item

logger = logging.getLogger(__name__)

CatalogLoader = Callable[[], Catalog | None]


class PageOutcome(enum.Enum):
    SKIPPED = "skipped"
    NO_DATA = "no-data"
    NO_CONTAINER = "no-container"
    RENDERED = "rendered"
    NOT_FOUND = "not-found"
    FAILED = "failed"


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def find_container(document: BeautifulSoup, container_id: str) -> Tag | None:
    return document.find(id=container_id)


def replace_contents(container: Tag, fragment: str) -> None:
    """Swap every child of ``container`` for the nodes parsed from ``fragment``."""
    nodes = list(BeautifulSoup(fragment, "html.parser").contents)
    container.clear()
    for node in nodes:
        container.append(node)


def set_title(document: BeautifulSoup, title: str) -> None:
    if document.title is not None:
        document.title.string = title
        return
    title_tag = document.new_tag("title")
    title_tag.string = title
    parent = document.head or document.html or document
    parent.insert(0, title_tag)


def init_page(
    url_path: str,
    document: BeautifulSoup,
    renderer: PageRenderer,
    load_catalog: CatalogLoader,
) -> PageOutcome:
    """Render the item for ``url_path`` into ``document`` in place.

    ``load_catalog`` is only called for pages that carry a category, so the
    site's home page never triggers a fetch.
    """
    ctx = resolve_page_context(url_path)
    if ctx.type is None:
        return PageOutcome.SKIPPED

    catalog = load_catalog()
    if catalog is None:
        return PageOutcome.NO_DATA
    if not category_items(catalog, ctx.type):
        logger.debug("No %r entries in catalog; leaving %s as authored", ctx.type, url_path)
        return PageOutcome.NO_DATA

    item = select_item(catalog, ctx.type, ctx.id)

    container = find_container(document, renderer.config.container_id)
    if container is None:
        logger.warning(
            "No #%s element in %s; skipping render", renderer.config.container_id, url_path
        )
        return PageOutcome.NO_CONTAINER

    if item is None:
        logger.info("No %s entry with id %r for %s", ctx.type, ctx.id, url_path)
        replace_contents(container, renderer.render_not_found())
        return PageOutcome.NOT_FOUND

    page = renderer.render_item(item, ctx.type)
    replace_contents(container, page.fragment)
    set_title(document, page.title)
    return PageOutcome.RENDERED
