"""
Renderer configuration.

Values come from explicit arguments, ``WARINC_*`` environment variables or a
``[warinc_pages]`` table in a TOML file, falling back to the site defaults.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

ENV_SITE_NAME = "WARINC_SITE_NAME"
ENV_IMAGE_BASE_PATH = "WARINC_IMAGE_BASE_PATH"
ENV_DATA_PATH = "WARINC_DATA_PATH"
ENV_CONTAINER_ID = "WARINC_CONTAINER_ID"

TOML_TABLE = "warinc_pages"


@dataclass(frozen=True)
class RendererConfig:
    site_name: str = "War Inc Rising"
    image_base_path: str = "../assets/images/skills/"
    data_path: str = "../data.json"
    container_id: str = "main-content-area"

    @classmethod
    def from_env(cls, base: RendererConfig | None = None) -> RendererConfig:
        config = base or cls()
        overrides = {
            name: os.environ[env]
            for name, env in (
                ("site_name", ENV_SITE_NAME),
                ("image_base_path", ENV_IMAGE_BASE_PATH),
                ("data_path", ENV_DATA_PATH),
                ("container_id", ENV_CONTAINER_ID),
            )
            if os.environ.get(env)
        }
        return replace(config, **overrides)

    @classmethod
    def from_toml(cls, path: Path) -> RendererConfig:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return cls.from_mapping(data.get(TOML_TABLE, {}))

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> RendererConfig:
        known = {field.name for field in fields(cls)}
        accepted: dict[str, str] = {}
        for key, value in values.items():
            if key not in known:
                logger.warning("Ignoring unknown config key %r", key)
                continue
            accepted[key] = str(value)
        return cls(**accepted)


def load_config(path: Path | None = None) -> RendererConfig:
    """Build the effective config: TOML file (if any), then env overrides."""
    base = RendererConfig.from_toml(path) if path is not None else RendererConfig()
    return RendererConfig.from_env(base)
