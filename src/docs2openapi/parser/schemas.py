"""Named schema definitions.

A definition lists its properties as a flat run of sibling rows. A row may be
followed by a continuation block (``json-inner-schema``) describing the row's
nested shape instead of starting a new property::

    <div class="prop-row">lines: array</div>
    <div class="json-inner-schema"><section class="json-schema-array-items">...
    <div class="prop-row">memo: string</div>

The scan walks the run with one cursor and a one-node lookahead: a row with a
continuation consumes two nodes, any other row consumes one.
"""

from bs4 import Tag

from docs2openapi.config import ExtractorConfig
from docs2openapi.errors import MalformedContinuation, NotFound
from docs2openapi.parser.base import (
    ArrayType,
    ObjectType,
    PrimitiveType,
    PropertyDescriptor,
    ReferenceType,
    SchemaDescriptor,
    TypeDescriptor,
    UnknownType,
)
from docs2openapi.parser.leaves import (
    cast_primitive,
    enum_values,
    optional_text,
    presence_flag,
    required_text,
    strip_trailing_colon,
)
from docs2openapi.parser.operations import schema_reference
from docs2openapi.parser.query import children, first, matches, own_text, text_of
from docs2openapi.log import get_logger

logger = get_logger(__name__)


def extract_schema(section: Tag, config: ExtractorConfig) -> SchemaDescriptor:
    """Parse one schema-definition section.

    The result always carries an ``id`` property referencing the shared
    record id, plus one property per row in the definition.
    """
    selectors = config.selectors
    name = strip_trailing_colon(required_text(first(section, selectors.definition_name)))

    properties = {"id": PropertyDescriptor(name="id", type=ReferenceType(target=config.id_reference))}
    container = first(section, selectors.schema_properties).or_none()
    if container is not None:
        properties.update(scan_properties(children(container), config))

    logger.debug("Schema %r: %d properties", name, len(properties))
    return SchemaDescriptor(name=name, properties=properties)


def scan_properties(siblings: list[Tag], config: ExtractorConfig) -> dict[str, PropertyDescriptor]:
    """Turn a flat run of property rows and continuation blocks into properties."""
    selectors = config.selectors
    properties: dict[str, PropertyDescriptor] = {}

    i = 0
    while i < len(siblings):
        term = siblings[i]
        if matches(term, selectors.continuation):
            # only reachable as the partner of a preceding row
            logger.warning("Skipping continuation block with no property row before it")
            i += 1
            continue

        if has_continuation(siblings, i, selectors.continuation):
            type_ = continuation_type(siblings[i + 1], config)
            i += 2
        else:
            type_ = declared_type(term, config)
            i += 1

        prop = extract_property(term, type_, config)
        properties[prop.name] = prop

    return properties


def has_continuation(siblings: list[Tag], i: int, selector: str) -> bool:
    """Whether the node after position ``i`` is a continuation block."""
    return i + 1 < len(siblings) and matches(siblings[i + 1], selector)


def extract_property(term: Tag, type_: TypeDescriptor, config: ExtractorConfig) -> PropertyDescriptor:
    selectors = config.selectors
    name_node = first(term, selectors.property_name).require()
    name = strip_trailing_colon(own_text(name_node) or text_of(name_node))
    if not name:
        raise NotFound(selectors.property_name)

    return PropertyDescriptor(
        name=name,
        title=optional_text(term, selectors.property_title),
        description=optional_text(term, selectors.description),
        read_only=presence_flag(term, selectors.property_read_only),
        required=presence_flag(term, selectors.required),
        type=type_,
    )


def declared_type(term: Tag, config: ExtractorConfig) -> TypeDescriptor:
    """Type read from the row itself, for rows without a continuation."""
    selectors = config.selectors
    type_name = cast_primitive(required_text(first(term, selectors.type)))

    if type_name == "array":
        items = schema_reference(term, selectors.schema_ref, config.ref_prefixes)
        return ArrayType(items=items or UnknownType())
    if type_name == "object":
        return ObjectType()

    facets = {}
    format_ = optional_text(term, selectors.property_format)
    if format_:
        facets["format"] = format_
    enum = enum_values(term, selectors.enum_item)
    if enum is not None:
        facets["enum"] = enum
    default = optional_text(term, selectors.default)
    if default is not None:
        facets["default"] = default
    return PrimitiveType(type=type_name, **facets)


def continuation_type(node: Tag, config: ExtractorConfig) -> TypeDescriptor:
    """Classify a continuation block, falling back to string for unknown shapes."""
    try:
        return classify_continuation(node, config)
    except MalformedContinuation as e:
        logger.warning("%s; using string", e)
        return PrimitiveType(type="string")


def classify_continuation(node: Tag, config: ExtractorConfig) -> TypeDescriptor:
    selectors = config.selectors
    # the outermost marker comes first in document order
    marker = first(node, f"{selectors.array_items}, {selectors.schema_properties}").or_none()
    if marker is None:
        raise MalformedContinuation("Continuation block has no array-items or properties marker")

    if matches(marker, selectors.array_items):
        return ArrayType(items=items_type(marker, config))
    return nested_object(marker, config)


def items_type(marker: Tag, config: ExtractorConfig) -> TypeDescriptor:
    """Type of the elements described by an array-items marker."""
    selectors = config.selectors
    node = first(marker, f"{selectors.schema_ref}, {selectors.schema_properties}, {selectors.type}").or_none()
    if node is None:
        return UnknownType()

    if matches(node, selectors.schema_ref):
        return schema_reference(marker, selectors.schema_ref, config.ref_prefixes) or UnknownType()
    if matches(node, selectors.schema_properties):
        return nested_object(node, config)
    return PrimitiveType(type=cast_primitive(text_of(node)))


def nested_object(marker: Tag, config: ExtractorConfig) -> ObjectType:
    return ObjectType(properties=scan_properties(children(marker), config))
