"""Failure kinds raised while serving documentation resources."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

from fastmcp.exceptions import ResourceError


class DocumentationError(ResourceError):
    """Base class for documentation lookup failures.

    Subclassing ``ResourceError`` lets FastMCP pass the message through to the
    client instead of masking it as an internal error.
    """

    def __init__(self, message: str, topic: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.topic = topic

    def __str__(self) -> str:
        return self.message


class InvalidTopic(DocumentationError, ValueError):
    """The topic contains a path separator."""

    def __init__(self, topic: str) -> None:
        super().__init__(f"Invalid topic parameter: {topic}", topic=topic)


class UnknownTopic(DocumentationError, ValueError):
    """The topic is neither an allowlisted topic nor a known alias."""

    def __init__(self, topic: str, available: Iterable[str]) -> None:
        self.available: Tuple[str, ...] = tuple(available)
        super().__init__(
            f"Unknown topic: {topic}. Available topics: {', '.join(self.available)}",
            topic=topic,
        )


class ResourceNotFound(DocumentationError):
    """An allowlisted topic has no markdown file deployed."""

    def __init__(self, topic: str, path: Path) -> None:
        self.path = path
        super().__init__(f"Resource file not found for topic: {topic}", topic=topic)


class ResourceReadError(DocumentationError):
    """The markdown file exists but could not be read."""

    def __init__(self, topic: str, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to read resource file for topic: {topic}", topic=topic)


class UnknownResource(DocumentationError):
    """A URI that no registered documentation domain serves."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"Unknown resource: {uri}")


__all__ = [
    "DocumentationError",
    "InvalidTopic",
    "UnknownTopic",
    "ResourceNotFound",
    "ResourceReadError",
    "UnknownResource",
]
