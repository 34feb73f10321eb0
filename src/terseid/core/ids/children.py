"""
Hierarchical child IDs.

Children append dot-separated numbers to a parent ID:

    bd-a7x -> bd-a7x.1 -> bd-a7x.1.3

Every function here goes through parse_id, so inputs are validated and
results are canonical (lowercase).
"""

from collections.abc import Iterable

from terseid.core.ids.exceptions import InvalidIdError
from terseid.core.ids.parser import parse_id


def child_id(parent_id: str, number: int) -> str:
    """
    Create the ID of child ``number`` under ``parent_id``.

    Raises:
        InvalidIdError: If parent_id is not a valid ID
        ValueError: If number is not an unsigned 32-bit integer

    Examples:
        >>> child_id("bd-a7x", 1)
        'bd-a7x.1'
        >>> child_id("BD-A7X.1", 3)
        'bd-a7x.1.3'
    """
    return parse_id(parent_id).child(number).to_id_string()


def is_child_id(id_str: str) -> bool:
    """
    True if ``id_str`` parses and has at least one child segment.

    Examples:
        >>> is_child_id("bd-a7x"), is_child_id("bd-a7x.1"), is_child_id("nope")
        (False, True, False)
    """
    try:
        return not parse_id(id_str).is_root()
    except InvalidIdError:
        return False


def id_depth(id_str: str) -> int:
    """
    Number of child segments in ``id_str`` (0 for a root ID).

    Raises:
        InvalidIdError: If id_str is not a valid ID
    """
    return parse_id(id_str).depth()


def next_child_number(parent_id: str, existing_ids: Iterable[str]) -> int:
    """
    Auto-select the next child number under ``parent_id``.

    Looks only at direct children of the parent among ``existing_ids`` and
    returns one past the largest number used, starting at 1. Unparseable
    entries are ignored.

    Raises:
        InvalidIdError: If parent_id is not a valid ID

    Example:
        >>> next_child_number("bd-a7x", ["bd-a7x.1", "bd-a7x.4", "bd-a7x.4.9", "bd-k2m.7"])
        5
    """
    parent = parse_id(parent_id)
    highest = 0
    for existing in existing_ids:
        try:
            candidate = parse_id(existing)
        except InvalidIdError:
            continue
        if candidate.depth() == parent.depth() + 1 and candidate.parent() == parent.to_id_string():
            highest = max(highest, candidate.child_path[-1])
    return highest + 1
