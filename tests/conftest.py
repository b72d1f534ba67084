import pytest

from sitemap_model.config.settings import reset_sitemap_runtime


@pytest.fixture(autouse=True)
def _reset_runtime_settings():
    reset_sitemap_runtime()
    yield
    reset_sitemap_runtime()
