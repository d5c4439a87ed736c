"""Whole-page extraction: every tag group and every schema definition."""

from bs4 import Tag

from docs2openapi.config import ExtractorConfig
from docs2openapi.parser.base import EndpointModel, SchemaDescriptor
from docs2openapi.parser.paths import PathMap, extract_paths
from docs2openapi.parser.query import find_all
from docs2openapi.parser.schemas import extract_schema
from docs2openapi.log import get_logger

logger = get_logger(__name__)


def extract_document(root: Tag, config: ExtractorConfig | None = None) -> EndpointModel:
    """Build the endpoint model for a fully rendered documentation page.

    Sections are processed strictly in document order; on a repeated key the
    later section wins. Any extraction error aborts the whole run.
    """
    config = config or ExtractorConfig()
    selectors = config.selectors

    paths: PathMap = {}
    for group in find_all(root, selectors.group):
        for path, methods in extract_paths(group, config).items():
            paths.setdefault(path, {}).update(methods)

    sections = find_all(root, selectors.definition)
    if config.schema_sections == "first":
        sections = sections[:1]

    schemas: dict[str, SchemaDescriptor] = {}
    for section in sections:
        schema = extract_schema(section, config)
        schemas[schema.name] = schema

    logger.info(
        "Extracted %d paths, %d operations, %d schemas",
        len(paths),
        sum(len(methods) for methods in paths.values()),
        len(schemas),
    )
    return EndpointModel(paths=paths, schemas=schemas)
