"""
Exception Types

Errors raised by the Ginga primitives. Every error is a programming
error on the caller's side; none of them is transient.
"""


class GingaError(Exception):
    """Base class for all errors raised by this library."""


class InvalidLengthError(GingaError, ValueError):
    """
    An input has the wrong length.

    Fixed-size inputs (block, key, nonce) must match expected exactly;
    with at_most set, expected is an upper bound instead.

    Subclasses ValueError so callers that already catch ValueError for
    malformed inputs keep working.
    """

    def __init__(self, what: str, expected: int, actual: int, at_most: bool = False):
        self.what = what
        self.expected = expected
        self.actual = actual
        self.at_most = at_most
        bound = "at most" if at_most else "exactly"
        super().__init__(f"{what} must be {bound} {expected} bytes, got {actual}")


def require_bytes(what: str, data) -> bytes:
    """
    Return data as immutable bytes, rejecting non bytes-like values.

    Raises:
        TypeError: If data is not bytes, bytearray or memoryview
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes-like, not {type(data).__name__}")
    return bytes(data)


def require_length(what: str, data, expected: int) -> bytes:
    """
    Return data as bytes after checking it has exactly the expected length.

    Raises:
        TypeError: If data is not bytes-like
        InvalidLengthError: If the length differs from expected
    """
    data = require_bytes(what, data)
    if len(data) != expected:
        raise InvalidLengthError(what, expected, len(data))
    return data
