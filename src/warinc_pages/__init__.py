"""Static page rendering for the War Inc Rising reference site."""

from warinc_pages.config import RendererConfig, load_config
from warinc_pages.context import PageContext, resolve_page_context
from warinc_pages.fetch import fetch_catalog, resolve_data_location
from warinc_pages.models import Catalog, Item, Skill
from warinc_pages.page import PageOutcome, init_page, parse_document
from warinc_pages.render import PageRenderer, RenderedPage
from warinc_pages.selector import select_item

__all__ = [
    "Catalog",
    "Item",
    "PageContext",
    "PageOutcome",
    "PageRenderer",
    "RenderedPage",
    "RendererConfig",
    "Skill",
    "fetch_catalog",
    "init_page",
    "load_config",
    "parse_document",
    "resolve_data_location",
    "resolve_page_context",
    "select_item",
]
