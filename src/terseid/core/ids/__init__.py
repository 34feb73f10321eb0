"""
ID engine for short, human-typeable identifiers.

IDs look like ``bd-a7x`` and grow (``bd-a7x3q9``) as the collection grows,
support hierarchical children (``bd-a7x.1.3``), and can be resolved from
abbreviated user input (``a7x``).

Public API:
    Hashing:
        - hash_bytes: Deterministic base36 hash of fixed length
        - optimal_length: Birthday-bound hash length for a collection size

    Generation:
        - IdGenerator: Multi-tier collision-avoiding generator
        - generate_id: One-call generation from content

    Parsing:
        - ParsedId: Structured ID value
        - parse_id: Parse string ID into ParsedId
        - is_valid_id_format: Check if string is valid ID format
        - normalize_id: Lowercase an ID
        - validate_prefix: Enforce an expected/allowed namespace
        - render_id: Render ID parts back to a string

    Children:
        - child_id, is_child_id, id_depth, next_child_number

    Resolution:
        - IdResolver, ResolvedId, MatchType, find_matching_ids

    Errors:
        - TerseIdError, InvalidIdError, PrefixMismatchError,
          AmbiguousIdError, NotFoundError

Example:
    >>> from terseid.core.ids import parse_id, child_id
    >>> parsed = parse_id("bd-a7x3q9.1.3")
    >>> parsed.depth(), parsed.parent()
    (2, 'bd-a7x3q9.1')
    >>> child_id("bd-a7x3q9", 2)
    'bd-a7x3q9.2'
"""

from terseid.core.ids.children import child_id, id_depth, is_child_id, next_child_number
from terseid.core.ids.exceptions import (
    AmbiguousIdError,
    InvalidIdError,
    NotFoundError,
    PrefixMismatchError,
    TerseIdError,
)
from terseid.core.ids.generator import IdGenerator, generate_id
from terseid.core.ids.hashing import BASE36_ALPHABET, base36_encode, hash_bytes
from terseid.core.ids.length import collision_probability, optimal_length
from terseid.core.ids.models import MatchType, ParsedId, ResolvedId
from terseid.core.ids.parser import (
    is_valid_hash_segment,
    is_valid_id_format,
    normalize_id,
    parse_id,
    render_id,
    validate_prefix,
)
from terseid.core.ids.resolver import IdResolver, find_matching_ids

__all__ = [
    # Hashing
    "BASE36_ALPHABET",
    "base36_encode",
    "hash_bytes",
    "collision_probability",
    "optimal_length",
    # Generation
    "IdGenerator",
    "generate_id",
    # Models
    "ParsedId",
    "ResolvedId",
    "MatchType",
    # Parser functions
    "parse_id",
    "is_valid_id_format",
    "is_valid_hash_segment",
    "normalize_id",
    "validate_prefix",
    "render_id",
    # Children
    "child_id",
    "is_child_id",
    "id_depth",
    "next_child_number",
    # Resolution
    "IdResolver",
    "find_matching_ids",
    # Errors
    "TerseIdError",
    "InvalidIdError",
    "PrefixMismatchError",
    "AmbiguousIdError",
    "NotFoundError",
]
