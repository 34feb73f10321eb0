"""
ID parser and validator.

This module turns ID strings back into ParsedId values and enforces the
grammar ``<prefix>-<hash>[.<child>]*``.

Prefixes may themselves contain hyphens (``my-proj-a7x3q9``), so the parser
picks the **last** dash whose following segment is a valid hash. A 4+
character hash must contain a digit, which is what lets ``my-proj`` stay
a prefix instead of being read as prefix ``my`` with hash ``proj``.

Public API:
    - parse_id: Parse string ID into ParsedId
    - is_valid_id_format: Check if string is valid ID format
    - is_valid_hash_segment: Check a bare hash segment
    - normalize_id: Lowercase an ID without validating it
    - validate_prefix: Enforce an expected/allowed namespace
"""

from collections.abc import Iterable

from pydantic import ValidationError

from terseid.core.ids.exceptions import InvalidIdError, PrefixMismatchError
from terseid.core.ids.models import (
    MAX_CHILD_SEGMENT,
    ParsedId,
    is_valid_hash_segment,
    render_id,
)

__all__ = [
    "is_valid_hash_segment",
    "is_valid_id_format",
    "normalize_id",
    "parse_id",
    "render_id",
    "validate_prefix",
]


def _parse_child_segment(token: str) -> int | None:
    # Plain ASCII digits only: no sign, no whitespace, no underscores
    if not token or not token.isascii() or not token.isdigit():
        return None
    value = int(token)
    if value > MAX_CHILD_SEGMENT:
        return None
    return value


def parse_id(id_str: str) -> ParsedId:
    """
    Parse a string ID into a ParsedId.

    The input is lowercased first. Only dashes before the first ``.`` are
    considered, tried from right to left; the first one followed by a valid
    hash segment splits prefix from hash. Any ``.``-separated tokens after
    the hash become the child path and must all be unsigned 32-bit integers.

    Args:
        id_str: The ID string to parse

    Returns:
        The parsed ID

    Raises:
        InvalidIdError: If no dash is followed by a valid hash, the prefix is
            not hyphen-joined letters/digits, or a child segment is not an unsigned 32-bit integer

    Examples:
        >>> parsed = parse_id("bd-a7x3q9.1.3")
        >>> (parsed.prefix, parsed.hash, parsed.child_path)
        ('bd', 'a7x3q9', (1, 3))
        >>> parse_id("my-proj-a7x3q9").prefix
        'my-proj'
        >>> parse_id("bd-proj")
        Traceback (most recent call last):
            ...
        terseid.core.ids.exceptions.InvalidIdError: invalid ID format: bd-proj
    """
    # Dashes after the first "." belong to the child path, never the prefix
    head, has_path, path = id_str.lower().partition(".")

    dash = head.rfind("-")
    while dash > 0:
        hash_part = head[dash + 1 :]
        if is_valid_hash_segment(hash_part):
            child_path = []
            if has_path:
                for token in path.split("."):
                    segment = _parse_child_segment(token)
                    if segment is None:
                        raise InvalidIdError(id_str)
                    child_path.append(segment)
            try:
                return ParsedId(
                    prefix=head[:dash],
                    hash=hash_part,
                    child_path=tuple(child_path),
                )
            except ValidationError as e:
                raise InvalidIdError(id_str) from e
        dash = head.rfind("-", 0, dash)

    raise InvalidIdError(id_str)


def is_valid_id_format(id_str: str) -> bool:
    """
    Check if a string is a valid ID. Never raises.

    Examples:
        >>> is_valid_id_format("bd-a7x.1")
        True
        >>> is_valid_id_format("invalid")
        False
    """
    try:
        parse_id(id_str)
    except InvalidIdError:
        return False
    return True


def normalize_id(id_str: str) -> str:
    """Lowercase an ID. Does not validate it."""
    return id_str.lower()


def validate_prefix(
    id_str: str,
    expected: str,
    allowed: Iterable[str] = (),
) -> ParsedId:
    """
    Check that an ID belongs to the expected namespace.

    Args:
        id_str: The ID string to check
        expected: The prefix the caller requires
        allowed: Other prefixes that are also accepted

    Returns:
        The parsed ID, for callers that need its parts

    Raises:
        InvalidIdError: If the ID cannot be parsed
        PrefixMismatchError: If the prefix is neither expected nor allowed

    Example:
        >>> validate_prefix("tk-r2m", "bd", ["bd"])
        Traceback (most recent call last):
            ...
        terseid.core.ids.exceptions.PrefixMismatchError: prefix mismatch: expected 'bd', found 'tk'
    """
    parsed = parse_id(id_str)

    if parsed.prefix == expected.lower():
        return parsed
    if parsed.prefix in {prefix.lower() for prefix in allowed}:
        return parsed

    raise PrefixMismatchError(expected=expected, found=parsed.prefix)
