"""Spec acquisition.

Reads a spec document from its source location and normalizes it into the
canonical in-repository ``openapi.json`` used by the generators.
"""

import datetime
import json
import logging
import shutil
from pathlib import Path

import yaml

from api_docs_gen.errors import SpecFormatError, SpecSourceError
from api_docs_gen.parser.detect import detect_encoding

logger = logging.getLogger(__name__)


def load_spec(file_path: Path) -> dict:
    """Read and parse a JSON or YAML spec file into a mapping."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecSourceError(f"Cannot read spec source {file_path}: {exc}") from exc

    encoding = detect_encoding(file_path, text)
    logger.debug("Parsing %s as %s", file_path, encoding)

    if encoding == "json":
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SpecFormatError(f"Invalid JSON in {file_path}: {exc}") from exc
    else:
        try:
            doc = _normalize(yaml.safe_load(text))
        except yaml.YAMLError as exc:
            raise SpecFormatError(f"Invalid YAML in {file_path}: {exc}") from exc

    if not isinstance(doc, dict):
        raise SpecFormatError(f"Spec {file_path} does not contain a mapping at the top level")
    return doc


def dump_spec(doc: dict) -> str:
    """Serialize a spec mapping in the canonical JSON form."""
    return json.dumps(doc, indent=2, ensure_ascii=False) + "\n"


def acquire_spec(source: Path, dest: Path) -> dict:
    """Read the spec at ``source`` and write it to ``dest`` as canonical JSON.

    JSON sources are copied as-is; YAML sources are converted. The source
    is fully parsed before ``dest`` is touched, so a bad source leaves no
    output behind. Returns the parsed mapping.
    """
    doc = load_spec(source)

    if source.resolve() == dest.resolve():
        logger.debug("Spec source and destination are the same file, nothing to copy")
        return doc

    dest.parent.mkdir(parents=True, exist_ok=True)
    if detect_encoding(source) == "json":
        shutil.copyfile(source, dest)
    else:
        dest.write_text(dump_spec(doc), encoding="utf-8")

    logger.info("Wrote canonical spec %s -> %s", source, dest)
    return doc


def _normalize(value):
    """Coerce YAML-only values into their JSON equivalents.

    YAML allows non-string keys (``200:``) and parses bare dates; JSON has
    neither, so keys become strings and dates ISO strings.
    """
    if isinstance(value, dict):
        return {str(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_normalize(v) for v in value]
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value
