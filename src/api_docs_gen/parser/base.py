"""Data models for a parsed OpenAPI document.

The reader converts the raw spec mapping into these models; the page
generators only ever see these.
"""

from pydantic import BaseModel


class Parameter(BaseModel):
    """A single operation parameter (query, path, header, or cookie)."""

    name: str
    location: str  # query / path / header / cookie
    required: bool = False
    type_label: str = "any"
    description: str = ""


class RequestBody(BaseModel):
    """Request body summary: media type plus the body schema label."""

    media_type: str = "application/json"
    schema_label: str = "any"
    schema_ref: str | None = None  # set when the body is a named schema
    required: bool = False
    description: str = ""


class Response(BaseModel):
    description: str = ""
    schema_label: str | None = None
    schema_ref: str | None = None


class Operation(BaseModel):
    """One HTTP method + path entry, rendered as one documentation page."""

    method: str  # GET / POST / PUT / DELETE / PATCH / ...
    path: str  # /pets/{petId}
    slug: str  # page identifier, unique within the document
    title: str
    description: str = ""
    operation_id: str | None = None
    tags: list[str] = []
    parameters: list[Parameter] = []
    request_body: RequestBody | None = None
    responses: dict[str, Response] = {}
    deprecated: bool = False


class PropertyRow(BaseModel):
    """One row of a schema property table."""

    name: str  # dotted path, e.g. owner.address.city
    type: str
    required: bool
    description: str = ""


class SchemaDef(BaseModel):
    """A named object definition from the spec."""

    name: str
    description: str = ""
    type: str = "object"
    properties: dict[str, dict] = {}
    required: list[str] = []


class ApiDocument(BaseModel):
    """The parsed spec document."""

    title: str = ""
    version: str = ""
    description: str = ""
    operations: list[Operation] = []
    schemas: list[SchemaDef] = []

    @property
    def schema_names(self) -> list[str]:
        return [s.name for s in self.schemas]
