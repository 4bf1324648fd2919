"""MDX page, card and manifest rendering."""

import json

import yaml

from api_docs_gen.generator.schema_table import (
    build_property_rows,
    code_label,
    escape_mdx,
    render_property_table,
    sanitize_description,
)
from api_docs_gen.parser.base import ApiDocument, Operation, SchemaDef

METHOD_COLORS = {
    "POST": "text-blue-600 dark:text-blue-400",
    "PUT": "text-yellow-600 dark:text-yellow-400",
    "DELETE": "text-red-600 dark:text-red-400",
    "PATCH": "text-orange-600 dark:text-orange-400",
}
DEFAULT_METHOD_COLOR = "text-green-600 dark:text-green-400"

CARDS_IMPORT = "import { Cards, Card } from 'fumadocs-ui/components/card';"

INDEX_PAGE = "index"
SCHEMAS_PAGE = "schemas"


def method_color(method: str) -> str:
    return METHOD_COLORS.get(method.upper(), DEFAULT_METHOD_COLOR)


def frontmatter(data: dict) -> str:
    body = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return f"---\n{body}---"


def _jsx_text(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("{", "&#123;")
        .replace("}", "&#125;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def _card_description(text: str) -> str:
    return text.replace('"', "'").split("\n")[0]


def _cell(text: str) -> str:
    return escape_mdx(sanitize_description(text))


# -- operation pages ----------------------------------------------------------

def render_operation_page(op: Operation) -> str:
    """Render one operation as an MDX page."""
    openapi_meta = {"method": op.method, "route": op.path}
    if op.operation_id:
        openapi_meta["operationId"] = op.operation_id
    parts = [
        frontmatter({
            "title": op.title,
            "description": op.description.split("\n")[0],
            "full": True,
            "_openapi": openapi_meta,
        })
    ]

    if op.deprecated:
        parts.append("> **Deprecated:** this operation may be removed in a future version.")
    if op.description:
        parts.append(escape_mdx(op.description.strip()))

    parts.append(f"```http\n{op.method} {op.path}\n```")
    if op.tags:
        parts.append("**Tags:** " + ", ".join(escape_mdx(tag) for tag in op.tags))

    if op.parameters:
        lines = [
            "## Parameters",
            "",
            "| Name | In | Type | Required | Description |",
            "|------|----|------|----------|-------------|",
        ]
        for p in op.parameters:
            required = "Yes" if p.required else "No"
            lines.append(
                f"| `{p.name}` | {p.location} | {code_label(p.type_label)} | {required} | {_cell(p.description)} |"
            )
        parts.append("\n".join(lines))

    if op.request_body:
        body = op.request_body
        schema = f"`{body.schema_ref}` schema" if body.schema_ref else code_label(body.schema_label)
        required = " (required)" if body.required else ""
        lines = ["## Request Body", "", f"`{body.media_type}`{required}: {schema}"]
        if body.description:
            lines.extend(["", escape_mdx(body.description.strip())])
        parts.append("\n".join(lines))

    if op.responses:
        lines = [
            "## Responses",
            "",
            "| Status | Description | Schema |",
            "|--------|-------------|--------|",
        ]
        for status, resp in op.responses.items():
            if resp.schema_ref:
                schema = f"`{resp.schema_ref}` schema"
            else:
                schema = code_label(resp.schema_label) if resp.schema_label else "-"
            lines.append(f"| `{status}` | {_cell(resp.description)} | {schema} |")
        parts.append("\n".join(lines))

    return "\n\n".join(parts) + "\n"


# -- navigation ---------------------------------------------------------------

def build_manifest(page_ids: list[str], title: str, include_schemas: bool = False) -> dict:
    """Navigation manifest: index first, then schemas (optional), then operations."""
    pages = [INDEX_PAGE]
    if include_schemas:
        pages.append(SCHEMAS_PAGE)
    pages.extend(page_ids)
    return {"title": title, "pages": pages}


def render_manifest(manifest: dict) -> str:
    return json.dumps(manifest, indent=2)


def render_operation_card(op: Operation, base_url: str) -> str:
    color = method_color(op.method)
    return (
        f'<Card href="{base_url}/{op.slug}" '
        f'title={{<><span className="font-mono font-medium {color}">{op.method}</span> {_jsx_text(op.title)}</>}} '
        f'description="{_card_description(op.description)}" />'
    )


def render_api_intro(document: ApiDocument) -> str:
    """Short API summary shown above the index cards."""
    lines = []
    if document.title:
        version = f" (version {document.version})" if document.version else ""
        lines.append(f"**{escape_mdx(document.title)}**{version}")
    if document.description:
        lines.append(escape_mdx(document.description.strip()))
    return "\n\n".join(lines)


def render_index(operations: list[Operation], base_url: str, title: str, description: str, intro: str = "") -> str:
    """Index page with one card per operation."""
    cards = "\n".join(render_operation_card(op, base_url) for op in operations)
    intro = f"\n\n{intro}" if intro else ""
    return (
        frontmatter({"title": title, "description": description})
        + f"\n\n{CARDS_IMPORT}{intro}\n\n<Cards>\n{cards}\n</Cards>\n"
    )


# -- schema reference ---------------------------------------------------------

def render_schema_page(schemas: list[SchemaDef], title: str) -> str:
    """Schema reference page: a card per schema, then one section per schema."""
    cards = "\n".join(
        f'<Card href="#{s.name.lower()}" title="{s.name}" description="{_card_description(s.description)}" />'
        for s in schemas
    )
    parts = [
        frontmatter({"title": title, "description": "Data models used by the API."}),
        CARDS_IMPORT,
        f"<Cards>\n{cards}\n</Cards>",
    ]

    for schema in schemas:
        section = [f"## {schema.name}"]
        if schema.description:
            section.append(escape_mdx(schema.description.strip()))
        if schema.properties:
            rows = build_property_rows(schema.properties, schema.required)
            section.append(render_property_table(rows))
        else:
            section.append(f"Type: {code_label(schema.type)}")
        parts.append("\n\n".join(section))

    return "\n\n".join(parts) + "\n"
