import pytest
from pydantic import ValidationError

from docs2openapi.parser.base import (
    ArrayType,
    EndpointModel,
    HttpMethod,
    ObjectType,
    OperationDescriptor,
    ParameterDescriptor,
    PrimitiveType,
    PropertyDescriptor,
    ReferenceType,
    SchemaDescriptor,
    UnknownType,
)


class TestTypeDescriptor:
    def test_primitive_omits_unset_facets(self):
        assert PrimitiveType(type="string").to_openapi() == {"type": "string"}

    def test_nested_array_of_objects(self):
        t = ArrayType(items=ObjectType(properties={"n": PropertyDescriptor(name="n", type=PrimitiveType(type="number"))}))
        assert t.to_openapi() == {
            "type": "array",
            "items": {"type": "object", "properties": {"n": {"type": "number"}}},
        }

    def test_unknown_and_reference(self):
        assert UnknownType().to_openapi() == {}
        assert ReferenceType(target="#/components/schemas/a").to_openapi() == {"$ref": "#/components/schemas/a"}

    def test_discriminated_by_kind(self):
        prop = PropertyDescriptor(name="x", type={"kind": "array", "items": {"kind": "reference", "target": "#/a"}})
        assert prop.type == ArrayType(items=ReferenceType(target="#/a"))

    def test_frozen(self):
        t = PrimitiveType(type="string")
        with pytest.raises(ValidationError):
            t.type = "integer"


class TestParameterDescriptor:
    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            ParameterDescriptor(name="", description="d", required=False, location="query", schema=UnknownType())

    def test_rejects_unknown_location(self):
        with pytest.raises(ValidationError):
            ParameterDescriptor(name="a", description="d", required=False, location="body", schema=UnknownType())


class TestOperationDescriptor:
    def test_rejects_empty_path(self):
        with pytest.raises(ValidationError):
            OperationDescriptor(method=HttpMethod.GET, path="", summary="s")

    def test_method_from_string(self):
        op = OperationDescriptor(method="delete", path="/a", summary="s")
        assert op.method is HttpMethod.DELETE


class TestEndpointModel:
    def test_to_openapi_sections(self):
        op = OperationDescriptor(method=HttpMethod.PATCH, path="/a", summary="Update", tags=["A"])
        schema = SchemaDescriptor(
            name="a",
            properties={"id": PropertyDescriptor(name="id", type=ReferenceType(target="#/components/schemas/recordId"))},
        )
        model = EndpointModel(paths={"/a": {HttpMethod.PATCH: op}}, schemas={"a": schema})
        assert model.paths_to_openapi() == {
            "/a": {"patch": {"summary": "Update", "parameters": [], "responses": {}, "tags": ["A"]}}
        }
        assert model.schemas_to_openapi() == {
            "a": {"type": "object", "properties": {"id": {"$ref": "#/components/schemas/recordId"}}}
        }
