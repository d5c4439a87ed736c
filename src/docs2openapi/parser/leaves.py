"""Single-node extractors shared by the operation, parameter and schema rules."""

from bs4 import Tag

from docs2openapi.errors import EmptyContent, InvalidMethod
from docs2openapi.parser.base import PRIMITIVE_TYPES, HttpMethod
from docs2openapi.parser.query import Found, Lookup, exists, find_all, first, text_of
from docs2openapi.log import get_logger

logger = get_logger(__name__)


def required_text(lookup: Lookup) -> str:
    """Trimmed text of a node that must exist and must not be blank."""
    node = lookup.require()
    text = text_of(node)
    if not text:
        raise EmptyContent(lookup.selector)
    return text


def optional_text(scope: Tag, selector: str) -> str | None:
    """Trimmed text of the first match, or None when absent or blank."""
    node = first(scope, selector).or_none()
    if node is None:
        return None
    return text_of(node) or None


def http_method(text: str) -> HttpMethod:
    try:
        return HttpMethod(text.strip().lower())
    except ValueError:
        raise InvalidMethod(text) from None


def presence_flag(scope: Tag, selector: str) -> bool:
    return exists(scope, selector)


def enum_values(scope: Tag, selector: str) -> list[str] | None:
    """Enumerated literals in document order, or None when the node lists none."""
    items = find_all(scope, selector)
    if not items:
        return None
    return [required_text(Found(item, selector)) for item in items]


def capitalize(text: str) -> str:
    """Uppercase the first character, leaving the rest unchanged."""
    return text[:1].upper() + text[1:]


def strip_trailing_colon(text: str) -> str:
    text = text.strip()
    if text.endswith(":"):
        text = text[:-1]
    return text.strip()


def cast_primitive(declared: str) -> str:
    """Map a declared type token onto the OpenAPI primitive vocabulary."""
    tokens = declared.lower().split()
    token = tokens[0] if tokens else ""
    if token in PRIMITIVE_TYPES:
        return token
    logger.debug("Unrecognized type %r, using string", declared)
    return "string"


def rewrite_ref(target: str, prefixes: dict[str, str]) -> str:
    """Rewrite a link target using the first matching prefix."""
    for old, new in prefixes.items():
        if target.startswith(old):
            return new + target[len(old):]
    return target
