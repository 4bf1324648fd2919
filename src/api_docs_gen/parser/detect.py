"""Auto-detect the encoding of a spec file."""

from pathlib import Path

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def detect_encoding(file_path: Path, text: str | None = None) -> str:
    """Detect whether a spec file is JSON or YAML.

    The file suffix decides when it is a known one; otherwise the content
    is sniffed. Returns: 'json' or 'yaml'.
    """
    suffix = file_path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"

    if text is None:
        text = file_path.read_text(encoding="utf-8")

    # JSON documents are objects; anything else is parsed as YAML
    if text.lstrip().startswith("{"):
        return "json"
    return "yaml"
