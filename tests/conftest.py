import pytest

from api_docs_gen.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Each test reads settings from its own environment."""
    for var in ("APIDOCS_SPEC_SOURCE", "APIDOCS_OUTPUT_DIR", "APIDOCS_INCLUDE_SCHEMAS", "APIDOCS_BASE_URL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
