"""Data models for an API description recovered from a documentation page.

The extractors build these bottom-up; each model renders itself as the
matching OpenAPI 3 fragment through ``to_openapi()``.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

PRIMITIVE_TYPES = ("string", "number", "integer", "boolean", "array", "object")

JSON_CONTENT = "application/json"


class HttpMethod(str, Enum):
    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class _Facets(_Frozen):
    """Format, default and enum, as documented on a parameter or property."""

    format: str | None = None
    default: Any = None
    enum: list[str] | None = None

    def _add_facets(self, result: dict) -> dict:
        if self.format is not None:
            result["format"] = self.format
        if self.default is not None:
            result["default"] = self.default
        if self.enum is not None:
            result["enum"] = list(self.enum)
        return result


class PrimitiveType(_Facets):
    kind: Literal["primitive"] = "primitive"
    type: str

    def to_openapi(self) -> dict:
        return self._add_facets({"type": self.type})


class UnknownType(_Frozen):
    """A type the page does not describe, e.g. the items of an array parameter."""

    kind: Literal["unknown"] = "unknown"

    def to_openapi(self) -> dict:
        return {}


class ReferenceType(_Frozen):
    kind: Literal["reference"] = "reference"
    target: str

    def to_openapi(self) -> dict:
        return {"$ref": self.target}


class ArrayType(_Facets):
    kind: Literal["array"] = "array"
    items: "TypeDescriptor" = UnknownType()

    def to_openapi(self) -> dict:
        return self._add_facets({"type": "array", "items": self.items.to_openapi()})


class ObjectType(_Frozen):
    """An inline object; its rows keep their title, description and flags."""

    kind: Literal["object"] = "object"
    properties: dict[str, "PropertyDescriptor"] = {}

    def to_openapi(self) -> dict:
        result: dict[str, Any] = {"type": "object"}
        if self.properties:
            result["properties"] = {name: p.to_openapi() for name, p in self.properties.items()}
            required = [name for name, p in self.properties.items() if p.required]
            if required:
                result["required"] = required
        return result


TypeDescriptor = Annotated[
    Union[PrimitiveType, ArrayType, ReferenceType, ObjectType, UnknownType],
    Field(discriminator="kind"),
]


class ParameterDescriptor(_Frozen):
    """A single operation parameter (query, path, header, or cookie)."""

    name: str = Field(min_length=1)
    description: str
    required: bool
    location: Literal["query", "path", "header", "cookie"]
    schema_: TypeDescriptor = Field(alias="schema")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_openapi(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "required": self.required,
            "in": self.location,
            "schema": self.schema_.to_openapi(),
        }


def _json_envelope(description: str, schema: TypeDescriptor) -> dict:
    return {
        "description": description,
        "content": {JSON_CONTENT: {"schema": schema.to_openapi()}},
    }


class OperationDescriptor(_Frozen):
    """One documented HTTP method + path pair."""

    method: HttpMethod
    path: str = Field(min_length=1)
    summary: str
    parameters: list[ParameterDescriptor] = []
    request_schema: ReferenceType | None = None
    response_schema: ReferenceType | None = None
    error_schema: ReferenceType | None = None
    tags: list[str] = []

    @property
    def responses(self) -> dict:
        """'200' iff a response schema was found, 'default' iff an error schema was."""
        responses = {}
        if self.response_schema is not None:
            responses["200"] = _json_envelope("Successful response", self.response_schema)
        if self.error_schema is not None:
            responses["default"] = _json_envelope("Error response", self.error_schema)
        return responses

    def to_openapi(self) -> dict:
        result: dict[str, Any] = {
            "summary": self.summary,
            "parameters": [p.to_openapi() for p in self.parameters],
            "responses": self.responses,
            "tags": list(self.tags),
        }
        if self.request_schema is not None:
            result["requestBody"] = {
                "content": {JSON_CONTENT: {"schema": self.request_schema.to_openapi()}}
            }
        return result


class PropertyDescriptor(_Frozen):
    name: str
    title: str | None = None
    description: str | None = None
    read_only: bool = False
    required: bool = False
    type: TypeDescriptor

    def to_openapi(self) -> dict:
        result = self.type.to_openapi()
        if self.title:
            result["title"] = self.title
        if self.description:
            result["description"] = self.description
        if self.read_only:
            result["readOnly"] = True
        return result


class SchemaDescriptor(_Frozen):
    name: str
    properties: dict[str, PropertyDescriptor]

    def to_openapi(self) -> dict:
        result: dict[str, Any] = {
            "type": "object",
            "properties": {name: p.to_openapi() for name, p in self.properties.items()},
        }
        required = [name for name, p in self.properties.items() if p.required]
        if required:
            result["required"] = required
        return result


class EndpointModel(_Frozen):
    """Everything recovered from one page: ``paths`` and ``components.schemas``."""

    paths: dict[str, dict[HttpMethod, OperationDescriptor]] = {}
    schemas: dict[str, SchemaDescriptor] = {}

    def paths_to_openapi(self) -> dict:
        return {
            path: {method.value: op.to_openapi() for method, op in methods.items()}
            for path, methods in self.paths.items()
        }

    def schemas_to_openapi(self) -> dict:
        return {name: schema.to_openapi() for name, schema in self.schemas.items()}


for _model in (ArrayType, ObjectType, PropertyDescriptor, ParameterDescriptor, SchemaDescriptor, OperationDescriptor, EndpointModel):
    _model.model_rebuild()
