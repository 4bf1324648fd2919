"""Schema cross-links for generated pages.

Rewrites inline-code mentions of schema names into links to the schema's
anchor on the schema reference page. Each name is substituted on its own,
in order, as plain text patterns.
"""

import re

INDEX_FILE = "index.mdx"


def linkify_schemas(content: str, schema_names: list[str], href: str) -> str:
    """Replace `` `Name` `` and `` `Name` schema`` with links to ``href#name``."""
    for name in schema_names:
        pattern = re.compile(rf"`{re.escape(name)}`( schema)?")
        link = f"[`{name}`]({href}#{name.lower()})"
        content = pattern.sub(lambda m, link=link: link + (m.group(1) or ""), content)
    return content


def linkify_files(files: dict[str, str], schema_names: list[str], href: str) -> dict[str, str]:
    """Apply linkify_schemas to every MDX page except the index."""
    if not schema_names:
        return files
    return {
        path: linkify_schemas(content, schema_names, href)
        if path.endswith(".mdx") and path != INDEX_FILE
        else content
        for path, content in files.items()
    }
