"""
Exceptions raised by the mushaf library.

Data-quality problems in upstream responses are logged and degraded, not
raised. The exceptions below cover caller mistakes and broken invariants.
"""


class MushafError(Exception):
    """Base exception for all mushaf errors."""


class InvalidPageError(MushafError, ValueError):
    """Raised when a page number falls outside the reference edition."""

    def __init__(self, page_number: object, total_pages: int = 604):
        self.page_number = page_number
        self.total_pages = total_pages
        super().__init__(
            f"Invalid page number: {page_number!r}. Must be 1-{total_pages}."
        )


class SourceFormatError(MushafError, TypeError):
    """Raised when a raw page response is not a JSON object at all."""

    def __init__(self, received: object):
        self.received = received
        super().__init__(
            f"Page response must be a mapping, got {type(received).__name__}"
        )


class LayoutInvariantError(MushafError):
    """
    Raised when the fixed 15-slot page structure cannot be established.

    This indicates a bug in the layout logic, not bad upstream data.
    """

    def __init__(self, page_number: int | None, message: str):
        self.page_number = page_number
        prefix = f"Page {page_number}: " if page_number is not None else ""
        super().__init__(f"{prefix}{message}")
