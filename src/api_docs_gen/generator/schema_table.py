"""Recursive property tables for the schema reference page."""

from api_docs_gen.parser.base import PropertyRow
from api_docs_gen.parser.openapi import schema_label


def sanitize_description(text: str | None) -> str:
    """Make a description safe for a single-line Markdown table cell."""
    if not text:
        return ""
    text = text.replace("|", "\\|")
    return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def escape_mdx(text: str) -> str:
    """Escape braces so free text is not read as a JSX expression."""
    return text.replace("{", "\\{").replace("}", "\\}")


def build_property_rows(properties: dict, required: list[str] | set[str] | None = None, prefix: str = "") -> list[PropertyRow]:
    """Flatten a property mapping into table rows, depth-first.

    Nested object properties follow their parent row, named with a dotted
    path and checked against the nested object's own ``required`` list.
    """
    required = set(required or [])
    rows: list[PropertyRow] = []

    for name, prop in properties.items():
        if not isinstance(prop, dict):
            continue
        full_name = f"{prefix}.{name}" if prefix else name
        rows.append(
            PropertyRow(
                name=full_name,
                type=schema_label(prop),
                required=name in required,
                description=sanitize_description(prop.get("description")),
            )
        )
        if prop.get("type") == "object" and isinstance(prop.get("properties"), dict):
            rows.extend(build_property_rows(prop["properties"], prop.get("required") or [], full_name))

    return rows


def code_label(label: str) -> str:
    """Inline-code a type label, keeping array brackets outside: `Pet`[]."""
    base = label.rstrip("[]")
    return f"`{base}`{label[len(base):]}"


def render_property_table(rows: list[PropertyRow]) -> str:
    if not rows:
        return "_No properties._"
    lines = [
        "| Property | Type | Required | Description |",
        "|----------|------|----------|-------------|",
    ]
    for row in rows:
        required = "Yes" if row.required else "No"
        lines.append(f"| `{row.name}` | {code_label(row.type)} | {required} | {escape_mdx(row.description)} |")
    return "\n".join(lines)
