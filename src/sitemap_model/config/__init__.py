from .settings import (
    SitemapRuntimeSettings,
    configure_sitemap_runtime,
    get_sitemap_runtime_settings,
    load_sitemap_config,
    reset_sitemap_runtime,
)

__all__ = [
    "SitemapRuntimeSettings",
    "configure_sitemap_runtime",
    "get_sitemap_runtime_settings",
    "load_sitemap_config",
    "reset_sitemap_runtime",
]
