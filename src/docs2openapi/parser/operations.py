"""Operation blocks: one HTTP method + path pair each."""

from bs4 import Tag

from docs2openapi.config import ExtractorConfig
from docs2openapi.parser.base import OperationDescriptor, ReferenceType
from docs2openapi.parser.leaves import capitalize, http_method, required_text, rewrite_ref
from docs2openapi.parser.parameters import extract_parameters
from docs2openapi.parser.query import attribute, first


def extract_operation(operation: Tag, group_name: str, config: ExtractorConfig) -> OperationDescriptor:
    """Parse one operation block. Any missing method, path or summary aborts."""
    selectors = config.selectors
    method = http_method(required_text(first(operation, selectors.operation_method)))
    path = required_text(first(operation, selectors.operation_path))
    summary = required_text(first(operation, selectors.operation_summary))

    return OperationDescriptor(
        method=method,
        path=path,
        summary=summary,
        parameters=extract_parameters(operation, selectors),
        request_schema=schema_reference(operation, selectors.request_ref, config.ref_prefixes),
        response_schema=schema_reference(operation, selectors.response_ref, config.ref_prefixes),
        error_schema=schema_reference(operation, selectors.error_ref, config.ref_prefixes),
        tags=[capitalize(group_name)],
    )


def schema_reference(scope: Tag, selector: str, prefixes: dict[str, str]) -> ReferenceType | None:
    """Reference read from the first schema link under ``selector``, if any."""
    link = first(scope, selector).or_none()
    if link is None:
        return None
    target = attribute(link, "href")
    if not target:
        return None
    return ReferenceType(target=rewrite_ref(target, prefixes))
