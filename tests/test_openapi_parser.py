from pathlib import Path

import pytest

from api_docs_gen.errors import SpecFormatError
from api_docs_gen.parser.openapi import parse_document, schema_label, slugify
from api_docs_gen.parser.source import load_spec

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def petstore():
    return parse_document(load_spec(FIXTURES / "petstore.yaml"))


class TestSlugify:
    def test_camel_case(self):
        assert slugify("showPetById") == "show-pet-by-id"

    def test_method_and_path(self):
        assert slugify("delete /pets/{petId}") == "delete-pets-pet-id"


class TestSchemaLabel:
    def test_ref(self):
        assert schema_label({"$ref": "#/components/schemas/Pet"}) == "Pet"

    def test_array_of_ref(self):
        assert schema_label({"type": "array", "items": {"$ref": "#/definitions/Pet"}}) == "Pet[]"

    def test_primitive(self):
        assert schema_label({"type": "integer", "format": "int32"}) == "integer"

    def test_missing_type_falls_back_to_any(self):
        assert schema_label({"description": "no type"}) == "any"
        assert schema_label(None) == "any"


class TestOpenApiOperations:
    def test_operations_in_document_order(self, petstore):
        assert [(op.method, op.path) for op in petstore.operations] == [
            ("GET", "/pets"),
            ("POST", "/pets"),
            ("GET", "/pets/{petId}"),
            ("DELETE", "/pets/{petId}"),
        ]

    def test_slugs(self, petstore):
        assert [op.slug for op in petstore.operations] == [
            "list-pets",
            "create-pets",
            "show-pet-by-id",
            "delete-pets-pet-id",
        ]

    def test_title_fallbacks(self, petstore):
        assert petstore.operations[0].title == "List all pets"
        assert petstore.operations[3].title == "DELETE /pets/{petId}"
        assert petstore.operations[3].description == ""
        assert petstore.operations[3].deprecated is True

    def test_query_parameter(self, petstore):
        list_pets = petstore.operations[0]
        assert len(list_pets.parameters) == 1
        assert list_pets.parameters[0].name == "limit"
        assert list_pets.parameters[0].type_label == "integer"
        assert list_pets.parameters[0].required is False

    def test_path_level_parameters_are_merged(self, petstore):
        show_pet = petstore.operations[2]
        assert show_pet.parameters[0].name == "petId"
        assert show_pet.parameters[0].location == "path"
        assert show_pet.parameters[0].required is True

    def test_request_body_ref(self, petstore):
        body = petstore.operations[1].request_body
        assert body is not None
        assert body.schema_ref == "Pet"
        assert body.required is True

    def test_responses(self, petstore):
        responses = petstore.operations[0].responses
        assert responses["200"].schema_label == "Pets"
        assert responses["default"].schema_ref == "Error"
        assert petstore.operations[1].responses["201"].schema_label is None

    def test_non_method_keys_skipped(self):
        doc = {"paths": {"/x": {"summary": "shared", "servers": [], "get": {"responses": {}}}}}
        result = parse_document(doc)
        assert len(result.operations) == 1

    def test_duplicate_slugs_get_suffix(self):
        doc = {
            "paths": {
                "/a": {"get": {"operationId": "fetch"}},
                "/b": {"get": {"operationId": "fetch"}},
            }
        }
        result = parse_document(doc)
        assert [op.slug for op in result.operations] == ["fetch", "fetch-2"]

    def test_parameter_ref_resolved(self):
        doc = {
            "components": {"parameters": {"Limit": {"name": "limit", "in": "query", "schema": {"type": "integer"}}}},
            "paths": {"/a": {"get": {"parameters": [{"$ref": "#/components/parameters/Limit"}]}}},
        }
        result = parse_document(doc)
        assert result.operations[0].parameters[0].name == "limit"


class TestSchemas:
    def test_schemas_in_document_order(self, petstore):
        assert petstore.schema_names == ["Pet", "Tag", "Pets", "Error"]

    def test_schema_fields(self, petstore):
        pet = petstore.schemas[0]
        assert pet.description == "A pet in the store."
        assert pet.required == ["id", "name"]
        assert list(pet.properties) == ["id", "name", "owner", "tag"]

    def test_missing_description_defaults_to_empty(self, petstore):
        assert petstore.schemas[1].description == ""

    def test_swagger2_definitions(self):
        doc = {
            "swagger": "2.0",
            "consumes": ["application/json"],
            "paths": {
                "/pets": {
                    "post": {
                        "parameters": [
                            {"name": "body", "in": "body", "required": True, "schema": {"$ref": "#/definitions/Pet"}},
                            {"name": "dryRun", "in": "query", "type": "boolean"},
                        ],
                        "responses": {"200": {"description": "ok", "schema": {"$ref": "#/definitions/Pet"}}},
                    }
                }
            },
            "definitions": {"Pet": {"properties": {"name": {"type": "string"}}}},
        }
        result = parse_document(doc)
        op = result.operations[0]
        assert op.request_body.schema_ref == "Pet"
        assert op.request_body.media_type == "application/json"
        assert [p.type_label for p in op.parameters if p.location == "query"] == ["boolean"]
        assert op.responses["200"].schema_ref == "Pet"
        assert result.schema_names == ["Pet"]
        assert result.schemas[0].type == "object"


class TestMalformedDocument:
    def test_paths_not_a_mapping(self):
        with pytest.raises(SpecFormatError):
            parse_document({"paths": ["/pets"]})

    def test_invalid_field_type(self):
        with pytest.raises(SpecFormatError):
            parse_document({"paths": {"/pets": {"get": {"tags": "pets"}}}})
