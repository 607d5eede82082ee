from __future__ import annotations

from typing import Literal

ErrorKind = Literal["MalformedDocument", "InvalidElement"]


class ParseError(ValueError):
    """Base error for a catalog response that could not be turned into records."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedDocumentError(ParseError):
    """The text is not decodable, or its root is not an array."""

    kind: ErrorKind = "MalformedDocument"


class InvalidElementError(ParseError):
    """An element of the top-level array is missing a field or has the wrong type.

    ``document`` is always the complete response text, not only the element,
    so the upstream response can be inspected as it was received.
    """

    kind: ErrorKind = "InvalidElement"

    def __init__(self, message: str, *, document: str, index: int, field: str | None) -> None:
        super().__init__(message)
        self.document = document
        self.index = index
        self.field = field

    def __str__(self) -> str:
        return f"{self.message}\n{self.document}"
