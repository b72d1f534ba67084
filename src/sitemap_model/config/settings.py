from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping

from sitemap_model.model.icon_format import IconFormat
from sitemap_model.util.file_utils import from_json_or_yaml

logger = logging.getLogger(__name__)

CONFIG_BLOCK_NAME = "sitemap_config"


@dataclass(frozen=True)
class SitemapRuntimeSettings:
    icon_format: IconFormat = IconFormat.SVG
    log_dropped_widgets: bool = True


_RUNTIME_SETTINGS = SitemapRuntimeSettings()

__all__ = [
    "CONFIG_BLOCK_NAME",
    "SitemapRuntimeSettings",
    "configure_sitemap_runtime",
    "get_sitemap_runtime_settings",
    "load_sitemap_config",
    "reset_sitemap_runtime",
]


def _normalize_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value or "").strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    return default


def configure_sitemap_runtime(config_dict: Mapping[str, Any]) -> SitemapRuntimeSettings:
    """Configure process-wide widget-building defaults from a config mapping."""
    global _RUNTIME_SETTINGS

    block = config_dict.get(CONFIG_BLOCK_NAME) if isinstance(config_dict, Mapping) else None
    if not isinstance(block, Mapping):
        return _RUNTIME_SETTINGS

    icon_format = _RUNTIME_SETTINGS.icon_format
    raw_icon_format = block.get("icon_format")
    if raw_icon_format is not None:
        try:
            icon_format = IconFormat.coerce(raw_icon_format)
        except ValueError:
            logger.warning(
                "Ignoring unsupported icon_format %r; keeping %s.",
                raw_icon_format,
                icon_format.value,
            )

    _RUNTIME_SETTINGS = replace(
        _RUNTIME_SETTINGS,
        icon_format=icon_format,
        log_dropped_widgets=_normalize_bool(
            block.get("log_dropped_widgets"),
            _RUNTIME_SETTINGS.log_dropped_widgets,
        ),
    )
    return _RUNTIME_SETTINGS


def get_sitemap_runtime_settings() -> SitemapRuntimeSettings:
    return _RUNTIME_SETTINGS


def reset_sitemap_runtime() -> None:
    global _RUNTIME_SETTINGS
    _RUNTIME_SETTINGS = SitemapRuntimeSettings()


def load_sitemap_config(config_path) -> SitemapRuntimeSettings:
    raw = from_json_or_yaml(config_path)
    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a mapping: {config_path}")
    return configure_sitemap_runtime(raw)
