"""Parameter rows of an operation block."""

from bs4 import Tag

from docs2openapi.config import Selectors
from docs2openapi.errors import InvalidLocation, NotFound
from docs2openapi.parser.base import ArrayType, ParameterDescriptor, PrimitiveType, UnknownType
from docs2openapi.parser.leaves import enum_values, presence_flag, required_text, strip_trailing_colon
from docs2openapi.parser.query import find_all, first, own_text

LOCATIONS = ("query", "path", "header", "cookie")


def extract_parameters(operation: Tag, selectors: Selectors) -> list[ParameterDescriptor]:
    """Parse every parameter row of an operation, in document order."""
    return [extract_parameter(row, selectors) for row in find_all(operation, selectors.parameter)]


def extract_parameter(row: Tag, selectors: Selectors) -> ParameterDescriptor:
    name = parameter_name(row, selectors.parameter_name)
    description = required_text(first(row, selectors.description))
    required = presence_flag(row, selectors.required)
    declared_type = required_text(first(row, selectors.type))

    facets = {}
    enum = enum_values(row, selectors.enum_item)
    if enum is not None:
        facets["enum"] = enum
    format_node = first(row, selectors.parameter_format)
    if format_node:
        facets["format"] = required_text(format_node)
    default_node = first(row, selectors.default)
    if default_node:
        facets["default"] = required_text(default_node)

    if declared_type == "array":
        # item schemas are never nested for parameters
        schema = ArrayType(items=UnknownType(), **facets)
    else:
        schema = PrimitiveType(type=declared_type, **facets)

    return ParameterDescriptor(
        name=name,
        description=description,
        required=required,
        location=parameter_location(row, selectors.parameter_location),
        schema=schema,
    )


def parameter_name(row: Tag, selector: str) -> str:
    """Name held directly by the title node, without decorative child markup."""
    title = first(row, selector).require()
    name = strip_trailing_colon(own_text(title))
    if not name:
        raise NotFound(selector)
    return name


def parameter_location(row: Tag, selector: str) -> str:
    subtitle = required_text(first(row, selector))
    location = subtitle.removeprefix("in").strip()
    if location not in LOCATIONS:
        raise InvalidLocation(subtitle)
    return location
