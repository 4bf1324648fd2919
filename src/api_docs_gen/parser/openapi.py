"""OpenAPI / Swagger document reader.

Converts a parsed OpenAPI 3.x or Swagger 2.0 mapping into an ApiDocument:
operations in document order and named schemas.
"""

import logging
import re

from pydantic import ValidationError

from api_docs_gen.errors import SpecFormatError

from .base import ApiDocument, Operation, Parameter, RequestBody, Response, SchemaDef

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def parse_document(doc: dict) -> ApiDocument:
    """Parse an OpenAPI/Swagger mapping into an ApiDocument."""
    try:
        info = doc.get("info") or {}
        operations = _parse_operations(doc)
        schemas = _parse_schemas(doc)
        document = ApiDocument(
            title=info.get("title") or "",
            version=str(info.get("version", "")),
            description=info.get("description") or "",
            operations=operations,
            schemas=schemas,
        )
    except (AttributeError, ValidationError) as exc:
        raise SpecFormatError(f"Spec document is structurally invalid: {exc}") from exc

    logger.debug("Parsed %d operations and %d schemas", len(operations), len(schemas))
    return document


def schema_label(schema: dict | None) -> str:
    """Short display label for a schema: ref name, ``items[]``, type or 'any'."""
    if not isinstance(schema, dict) or not schema:
        return "any"
    if "$ref" in schema:
        return ref_name(schema["$ref"])
    typ = schema.get("type")
    if typ == "array":
        return f"{schema_label(schema.get('items'))}[]"
    if isinstance(typ, list):
        # OpenAPI 3.1 allows ["string", "null"]
        return " or ".join(str(t) for t in typ)
    return typ or "any"


def ref_name(ref: str) -> str:
    return ref.rsplit("/", 1)[-1]


def slugify(text: str) -> str:
    """Lower-case, dash-separated page identifier."""
    text = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", text)
    text = re.sub(r"[^A-Za-z0-9]+", "-", text)
    return text.strip("-").lower()


# -- operations ---------------------------------------------------------------

def _parse_operations(doc: dict) -> list[Operation]:
    operations = []
    seen_slugs: set[str] = set()
    paths = doc.get("paths") or {}

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        shared_params = path_item.get("parameters") or []

        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue

            op_id = operation.get("operationId")
            slug = _unique_slug(slugify(str(op_id)) if op_id else slugify(f"{method} {path}"), seen_slugs)
            params = _merge_parameters(shared_params, operation.get("parameters") or [], doc)

            operations.append(
                Operation(
                    method=method.upper(),
                    path=path,
                    slug=slug,
                    title=operation.get("summary") or op_id or f"{method.upper()} {path}",
                    description=operation.get("description") or "",
                    operation_id=op_id,
                    tags=operation.get("tags") or [],
                    parameters=[_parse_parameter(p) for p in params],
                    request_body=_parse_request_body(operation, params, doc),
                    responses=_parse_responses(operation.get("responses") or {}, doc),
                    deprecated=bool(operation.get("deprecated", False)),
                )
            )

    return operations


def _unique_slug(slug: str, seen: set[str]) -> str:
    slug = slug or "operation"
    candidate, n = slug, 1
    while candidate in seen:
        n += 1
        candidate = f"{slug}-{n}"
    seen.add(candidate)
    return candidate


def _resolve(node: dict, doc: dict) -> dict:
    """Follow a local ``#/...`` reference; anything else is returned unchanged."""
    ref = node.get("$ref") if isinstance(node, dict) else None
    if not isinstance(ref, str) or not ref.startswith("#/"):
        return node
    target = doc
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(target, dict) or part not in target:
            logger.warning("Unresolvable reference %s", ref)
            return node
        target = target[part]
    return target


def _merge_parameters(shared: list[dict], own: list[dict], doc: dict) -> list[dict]:
    merged: dict[tuple, dict] = {}
    for p in list(shared) + list(own):
        p = _resolve(p, doc)
        if not isinstance(p, dict) or "name" not in p:
            continue
        merged[(p["name"], p.get("in", "query"))] = p
    return list(merged.values())


def _parse_parameter(p: dict) -> Parameter:
    # Swagger 2.0 puts the type on the parameter itself
    schema = p.get("schema") or {k: p[k] for k in ("type", "items") if k in p}
    location = p.get("in", "query")
    return Parameter(
        name=p["name"],
        location=location,
        required=bool(p.get("required", location == "path")),
        type_label=schema_label(schema),
        description=p.get("description") or "",
    )


def _parse_request_body(operation: dict, params: list[dict], doc: dict) -> RequestBody | None:
    body = operation.get("requestBody")
    if body:
        body = _resolve(body, doc)
        content = body.get("content") or {}
        media_type, schema = _pick_content(content)
        return RequestBody(
            media_type=media_type,
            schema_label=schema_label(schema),
            schema_ref=_named_ref(schema),
            required=bool(body.get("required", False)),
            description=body.get("description") or "",
        )

    # Swagger 2.0 body parameter
    for p in params:
        if p.get("in") == "body":
            schema = p.get("schema") or {}
            consumes = operation.get("consumes") or doc.get("consumes") or ["application/json"]
            return RequestBody(
                media_type=consumes[0],
                schema_label=schema_label(schema),
                schema_ref=_named_ref(schema),
                required=bool(p.get("required", False)),
                description=p.get("description") or "",
            )
    return None


def _pick_content(content: dict) -> tuple[str, dict | None]:
    for media_type in ("application/json", "multipart/form-data"):
        if media_type in content:
            return media_type, (content[media_type] or {}).get("schema")
    # Fallback: first available media type
    for media_type, media in content.items():
        return media_type, (media or {}).get("schema")
    return "application/json", None


def _named_ref(schema: dict | None) -> str | None:
    if isinstance(schema, dict) and isinstance(schema.get("$ref"), str):
        return ref_name(schema["$ref"])
    return None


def _parse_responses(responses: dict, doc: dict) -> dict[str, Response]:
    result = {}
    for status_code, resp in responses.items():
        resp = _resolve(resp or {}, doc)
        if "content" in resp:
            _, schema = _pick_content(resp.get("content") or {})
        else:
            schema = resp.get("schema")
        result[str(status_code)] = Response(
            description=resp.get("description") or "",
            schema_label=schema_label(schema) if schema else None,
            schema_ref=_named_ref(schema),
        )
    return result


# -- schemas ------------------------------------------------------------------

def _parse_schemas(doc: dict) -> list[SchemaDef]:
    components = doc.get("components") or {}
    schemas = components.get("schemas") or doc.get("definitions") or {}

    result = []
    for name, schema in schemas.items():
        if not isinstance(schema, dict):
            continue
        result.append(
            SchemaDef(
                name=name,
                description=schema.get("description") or "",
                type=schema_label(schema) if "type" in schema else "object",
                properties={k: v for k, v in (schema.get("properties") or {}).items() if isinstance(v, dict)},
                required=schema.get("required") or [],
            )
        )
    return result
