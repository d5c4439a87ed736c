"""Node queries over a rendered page snapshot.

Lookups return ``Found`` or ``Missing`` instead of ``None`` so every call site
states what absence means to it: ``require()`` to fail, ``or_none()`` to skip.
"""

from dataclasses import dataclass

from bs4 import Comment, NavigableString, Tag

from docs2openapi.errors import NotFound


@dataclass(frozen=True)
class Found:
    node: Tag
    selector: str

    def require(self) -> Tag:
        return self.node

    def or_none(self) -> Tag | None:
        return self.node

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Missing:
    selector: str

    def require(self) -> Tag:
        raise NotFound(self.selector)

    def or_none(self) -> Tag | None:
        return None

    def __bool__(self) -> bool:
        return False


Lookup = Found | Missing


def first(scope: Tag, selector: str) -> Lookup:
    """First descendant of ``scope`` matching ``selector``."""
    node = scope.select_one(selector)
    if node is None:
        return Missing(selector)
    return Found(node, selector)


def find_all(scope: Tag, selector: str) -> list[Tag]:
    """All descendants of ``scope`` matching ``selector``, in document order."""
    return list(scope.select(selector))


def children(scope: Tag) -> list[Tag]:
    """Direct element children of ``scope``, in document order."""
    return [child for child in scope.children if isinstance(child, Tag)]


def matches(node: Tag, selector: str) -> bool:
    """Whether ``node`` itself matches ``selector``."""
    return node.css.match(selector)


def exists(scope: Tag, selector: str) -> bool:
    return scope.select_one(selector) is not None


def text_of(node: Tag) -> str:
    return node.get_text().strip()


def own_text(node: Tag) -> str:
    """Text held directly by ``node``, ignoring nested elements and comments."""
    parts = [
        str(child)
        for child in node.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    ]
    return "".join(parts).strip()


def attribute(node: Tag, name: str) -> str | None:
    value = node.get(name)
    if isinstance(value, list):
        # multi-valued attributes such as class
        return " ".join(value)
    return value
