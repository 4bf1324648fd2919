"""Settings for api-docs-gen.

Values come from ``APIDOCS_*`` environment variables or a local ``.env``
file; command-line options take precedence over both.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocsSettings(BaseSettings):
    """Generation settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="APIDOCS_", env_file=".env", extra="ignore")

    # Spec acquisition
    spec_source: Path | None = None
    spec_path: Path = Path("openapi.json")

    # Output
    output_dir: Path = Path("content/docs/api-reference")
    base_url: str = "/api-reference"
    title: str = "API Reference"
    index_title: str = "Overview"
    index_description: str = "Overview of all available API endpoints."
    include_schemas: bool = True
    schemas_title: str = "Schemas"

    # Layout shell
    site_title: str = "API Docs"
    logo: str | None = Field(default=None, description="Branding image path, e.g. /logo.png")

    log_level: str = "WARNING"


@lru_cache()
def get_settings() -> DocsSettings:
    """Get cached settings."""
    return DocsSettings()
