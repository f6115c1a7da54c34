#!/usr/bin/env python
"""build_pages.py – site page renderer.

Walks a directory of static page shells and fills each page's content
container from data.json, writing the results under an output directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from warinc_pages.config import RendererConfig, load_config
from warinc_pages.fetch import fetch_catalog, resolve_data_location
from warinc_pages.page import PageOutcome, init_page, parse_document
from warinc_pages.render import PageRenderer

logger = logging.getLogger(__name__)


def page_url_path(site_dir: Path, page: Path) -> str:
    return "/" + page.relative_to(site_dir).as_posix()


def build_page(
    page: Path,
    site_dir: Path,
    out_dir: Path,
    renderer: PageRenderer,
    data_location: str | None = None,
) -> PageOutcome:
    location = data_location or resolve_data_location(str(page), renderer.config.data_path)
    document = parse_document(page.read_text(encoding="utf-8"))
    outcome = init_page(
        page_url_path(site_dir, page),
        document,
        renderer,
        lambda: fetch_catalog(location),
    )

    out_path = out_dir / page.relative_to(site_dir)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(str(document), encoding="utf-8")
    print(f"✓ Wrote {out_path}")
    return outcome


def build_site(
    site_dir: Path,
    out_dir: Path,
    config: RendererConfig | None = None,
    data_location: str | None = None,
) -> Counter[PageOutcome]:
    renderer = PageRenderer(config)
    outcomes: Counter[PageOutcome] = Counter()
    for page in sorted(site_dir.rglob("*.html")):
        if out_dir in page.parents:
            continue
        try:
            outcome = build_page(page, site_dir, out_dir, renderer, data_location)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Unable to build %s: %s", page, e)
            outcome = PageOutcome.FAILED
        logger.debug("%s: %s", page, outcome.value)
        outcomes[outcome] += 1
    return outcomes


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render site pages from data.json")
    parser.add_argument("site_dir", help="Directory containing the page shells")
    parser.add_argument("--out", help="Output directory (defaults to <site_dir>/../build)")
    parser.add_argument(
        "--data",
        help="Data file path or URL used for every page (defaults to the configured "
        "data path relative to each page)",
    )
    parser.add_argument("--config", help="TOML file with a [warinc_pages] table")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, stream=sys.stderr)

    site_dir = Path(args.site_dir)
    if not site_dir.is_dir():
        print(f"✗ {site_dir} is not a directory", file=sys.stderr)
        return 2
    out_dir = Path(args.out) if args.out else site_dir.parent / "build"
    config = load_config(Path(args.config) if args.config else None)

    outcomes = build_site(site_dir, out_dir, config, args.data)
    print(f"\n✓ Built {sum(outcomes.values())} page(s)")
    for outcome in PageOutcome:
        if outcomes[outcome]:
            print(f"  {outcome.value}: {outcomes[outcome]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
