"""
Exceptions raised by the ID engine.

Each error kind carries its structured payload as attributes so callers can
branch on the type and inspect the data instead of parsing messages.

Exception Hierarchy:
    TerseIdError (base)
    ├── InvalidIdError (input does not match the ID grammar)
    ├── PrefixMismatchError (namespace enforcement failed)
    ├── AmbiguousIdError (partial input matched several IDs)
    └── NotFoundError (no resolution stage matched)

Example:
    >>> from terseid.core.ids.exceptions import AmbiguousIdError
    >>> try:
    ...     raise AmbiguousIdError("a7x", ["bd-a7x3q9", "bd-a7xbb1"])
    ... except AmbiguousIdError as e:
    ...     print(e.matches)
    ('bd-a7x3q9', 'bd-a7xbb1')
"""

from collections.abc import Iterable


class TerseIdError(Exception):
    """
    Base exception for all ID engine errors.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidIdError(TerseIdError, ValueError):
    """
    Raised when a string does not match ``<prefix>-<hash>[.<child>]*``.

    Attributes:
        id: The offending input
    """

    def __init__(self, id: str) -> None:
        super().__init__(f"invalid ID format: {id}")
        self.id = id


class PrefixMismatchError(TerseIdError):
    """
    Raised when a parsed prefix is neither the expected one nor allowed.

    Attributes:
        expected: The prefix the caller required
        found: The prefix actually present in the ID
    """

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(f"prefix mismatch: expected '{expected}', found '{found}'")
        self.expected = expected
        self.found = found


class AmbiguousIdError(TerseIdError):
    """
    Raised when a partial reference matches more than one ID.

    Attributes:
        partial: The normalized partial input
        matches: Every matching ID, in the order the caller supplied them
    """

    def __init__(self, partial: str, matches: Iterable[str]) -> None:
        self.partial = partial
        self.matches = tuple(matches)
        super().__init__(f"ambiguous ID '{partial}': matches {list(self.matches)}")


class NotFoundError(TerseIdError, LookupError):
    """
    Raised when no resolution stage matched the input.

    Attributes:
        id: The normalized input that could not be resolved
    """

    def __init__(self, id: str) -> None:
        super().__init__(f"ID not found: {id}")
        self.id = id
