"""Errors raised while extracting an API description from a rendered page.

Everything except MalformedContinuation aborts the whole run.
"""


class ExtractionError(Exception):
    """Base class for all extraction failures."""


class NotFound(ExtractionError):
    """An element the extraction rules require is absent."""

    def __init__(self, selector: str):
        super().__init__(f"Element not found: {selector}")
        self.selector = selector


class EmptyContent(ExtractionError):
    """An element exists but its trimmed text is empty."""

    def __init__(self, selector: str):
        super().__init__(f"Text content not found for element: {selector}")
        self.selector = selector


class InvalidMethod(ExtractionError):
    def __init__(self, token: str):
        super().__init__(f"Invalid method: {token}")
        self.token = token


class InvalidLocation(ExtractionError):
    def __init__(self, token: str):
        super().__init__(f"Invalid parameter location: {token}")
        self.token = token


class MalformedContinuation(ExtractionError):
    """A continuation block carries none of the known shape markers.

    Never escapes the schema extractor, which falls back to a string type.
    """
