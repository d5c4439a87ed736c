"""Tag-group sections: the operations documented under one heading."""

from bs4 import Tag

from docs2openapi.config import ExtractorConfig
from docs2openapi.parser.base import HttpMethod, OperationDescriptor
from docs2openapi.parser.leaves import required_text
from docs2openapi.parser.operations import extract_operation
from docs2openapi.parser.query import find_all, first
from docs2openapi.log import get_logger

logger = get_logger(__name__)

PathMap = dict[str, dict[HttpMethod, OperationDescriptor]]


def extract_paths(group: Tag, config: ExtractorConfig) -> PathMap:
    """Map path -> method -> operation for one group section.

    Sections without a tag heading are not API groups and yield nothing.
    A repeated (path, method) keeps the last operation in document order.
    """
    selectors = config.selectors
    heading = first(group, selectors.group_heading)
    if not heading:
        return {}
    group_name = required_text(heading)

    paths: PathMap = {}
    for node in find_all(group, selectors.operation):
        operation = extract_operation(node, group_name, config)
        paths.setdefault(operation.path, {})[operation.method] = operation

    logger.debug("Group %r: %d paths", group_name, len(paths))
    return paths
