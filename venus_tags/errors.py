"""Exceptions raised while collecting Venus market tags."""

from __future__ import annotations


class VenusTagsError(Exception):
    """Base class for all tag collection failures."""


class UnsupportedChainError(VenusTagsError, ValueError):
    """Raised when a chain ID has no configured subgraph endpoint."""


class SubgraphHTTPError(VenusTagsError):
    """Raised when the subgraph endpoint answers with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"HTTP error! status: {status_code}")


class SubgraphQueryError(VenusTagsError):
    """Raised when the GraphQL response carries one or more errors."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__(f"GraphQL errors occurred: {'; '.join(messages)}")


class SubgraphNoDataError(VenusTagsError):
    """Raised when the GraphQL response has no usable data payload."""


class MalformedMarketError(SubgraphNoDataError):
    """Raised when a market entry in the payload cannot be parsed."""


class PaginationError(VenusTagsError):
    """Raised when a page is unsorted or does not advance past the cursor."""


class TagCollectionError(VenusTagsError):
    """Raised by the pagination driver when a collection run fails."""
