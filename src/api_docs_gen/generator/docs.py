"""Documentation generator: turns a parsed ApiDocument into site content files."""

import logging
from pathlib import Path

from api_docs_gen.config import DocsSettings
from api_docs_gen.generator.linkify import linkify_files
from api_docs_gen.generator.pages import (
    INDEX_PAGE,
    SCHEMAS_PAGE,
    build_manifest,
    render_api_intro,
    render_index,
    render_manifest,
    render_operation_page,
    render_schema_page,
)
from api_docs_gen.parser.base import ApiDocument

logger = logging.getLogger(__name__)

MANIFEST_FILE = "meta.json"


class DocsGenerator:
    """Generates one page per operation plus index, manifest and schema pages."""

    def __init__(self, settings: DocsSettings | None = None):
        self.settings = settings or DocsSettings()

    @property
    def base_url(self) -> str:
        return self.settings.base_url.rstrip("/")

    def generate(self, document: ApiDocument) -> dict[str, str]:
        """Generate all content files.

        Returns dict of {relative path: content}, operation pages first in
        document order, then meta.json, index.mdx and (optionally) schemas.mdx.
        """
        files: dict[str, str] = {}
        for op in document.operations:
            files[f"{op.slug}.mdx"] = render_operation_page(op)

        include_schemas = self.settings.include_schemas and bool(document.schemas)
        if self.settings.include_schemas and not document.schemas:
            logger.info("Document defines no schemas, skipping the schema page")

        manifest = build_manifest([op.slug for op in document.operations], self.settings.title, include_schemas)
        files[MANIFEST_FILE] = render_manifest(manifest)
        files[f"{INDEX_PAGE}.mdx"] = render_index(
            document.operations,
            self.base_url,
            self.settings.index_title,
            self.settings.index_description,
            intro=render_api_intro(document),
        )

        if include_schemas:
            files[f"{SCHEMAS_PAGE}.mdx"] = render_schema_page(document.schemas, self.settings.schemas_title)
            files = linkify_files(files, document.schema_names, f"{self.base_url}/{SCHEMAS_PAGE}")

        logger.debug("Generated %d files", len(files))
        return files


def write_files(output: Path, files: dict[str, str]) -> list[Path]:
    """Write generated files under ``output``; returns the written paths."""
    written = []
    output.mkdir(parents=True, exist_ok=True)
    for filename, content in files.items():
        file_path = output / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        written.append(file_path)
    return written
