"""Render catalog items into HTML fragments using Jinja2 templates."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from warinc_pages.config import RendererConfig
from warinc_pages.context import BUILDINGS, CHARACTERS, GUIDES, MODES, UNITS
from warinc_pages.models import Item

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

CATEGORY_GLYPHS = {
    CHARACTERS: "🐉",
    UNITS: "🛡️",
    BUILDINGS: "🏛️",
    MODES: "🎮",
    GUIDES: "📚",
}

NOT_FOUND_MESSAGE = "找不到對應的資料！"


def _finalize(value):
    return "" if value is None else value


def build_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
        finalize=_finalize,
    )


@dataclass(frozen=True)
class RenderedPage:
    title: str
    fragment: Markup


def heading_for(item: Item, page_type: str | None) -> str:
    name = item.display_name
    main_title = f"{name} ({item.name_en})" if item.name_en else name
    glyph = CATEGORY_GLYPHS.get(page_type or "")
    return f"{glyph} {main_title}" if glyph else main_title


class PageRenderer:
    """Turns items into page fragments for one site configuration."""

    def __init__(self, config: RendererConfig | None = None, env: Environment | None = None):
        self.config = config or RendererConfig()
        self.env = env or build_environment()

    def page_title(self, item: Item) -> str:
        return f"{self.config.site_name} - {item.display_name}"

    def render_item(self, item: Item, page_type: str | None) -> RenderedPage:
        tmpl = self.env.get_template("detail.html")
        fragment = tmpl.render(
            item=item,
            heading=heading_for(item, page_type),
            subtitle=item.role or item.description,
            image=item.main_image or item.icon,
            image_base_path=self.config.image_base_path,
        )
        return RenderedPage(title=self.page_title(item), fragment=Markup(fragment))

    def render_not_found(self) -> Markup:
        tmpl = self.env.get_template("not_found.html")
        return Markup(tmpl.render(message=NOT_FOUND_MESSAGE))
