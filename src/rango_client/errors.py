"""Error types raised by the Rango client.

Decode errors and transport errors are deliberately separate hierarchies:
a ``RangoApiError`` means the HTTP exchange failed, a ``DecodeError`` means
the service answered with a body we cannot turn into a typed model.
"""

from typing import Any, Optional


class DecodeError(ValueError):
    """Base class for every failure to decode a response body."""

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(message)


class MalformedJson(DecodeError):
    """Raised when the body is not valid JSON."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Malformed JSON: {detail}")


class MissingField(DecodeError):
    """Raised when a required field is absent."""

    def __init__(self, path: str):
        super().__init__(f"Missing required field '{path}'", path=path)

    @property
    def field(self) -> str:
        """Last segment of the path (the field name itself)."""
        return self.path.rsplit(".", 1)[-1]


class TypeMismatch(DecodeError):
    """Raised when a field holds a value of the wrong type."""

    def __init__(self, path: str, expected: str, actual: Any = None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Field '{path}' expected {expected}, got {_describe(actual)}",
            path=path,
        )


class UnknownVariant(DecodeError):
    """Raised when a transaction carries a discriminator we do not know."""

    def __init__(self, tag: str, path: str = "tx.type"):
        self.tag = tag
        super().__init__(f"Unknown transaction type '{tag}' at '{path}'", path=path)


class RangoApiError(Exception):
    """Raised when an HTTP call to the Rango API fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.url = url
        super().__init__(message)


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    text = repr(value)
    if len(text) > 80:
        text = text[:77] + "..."
    return f"{type(value).__name__} {text}"
