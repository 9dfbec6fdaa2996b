from __future__ import annotations


class FetchError(Exception):
    """Base class for a failed catalog fetch. Never retried."""


class NetworkFailure(FetchError):
    """Transport error, timeout or non-success HTTP status."""


class ParseFailure(FetchError):
    """The response body is not valid JSON."""


class UnexpectedShape(FetchError):
    """The entity list is not where the listing response should keep it."""

    def __init__(self, segment: str | int, depth: int) -> None:
        super().__init__(f"response path not resolvable at {segment!r} (depth {depth})")
        self.segment = segment
        self.depth = depth
