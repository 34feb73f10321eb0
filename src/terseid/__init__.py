"""
terseid - short, human-typeable identifiers

Hash-based IDs that grow with the collection, avoid collisions through a
caller-supplied existence check, nest as hierarchical children, and resolve
from abbreviated user input.
"""

__version__ = "0.3.0"

# Re-export the public API for convenience
from terseid.core.config import IdConfig, ResolverConfig, load_id_config, load_resolver_config
from terseid.core.ids import (
    AmbiguousIdError,
    IdGenerator,
    IdResolver,
    InvalidIdError,
    MatchType,
    NotFoundError,
    ParsedId,
    PrefixMismatchError,
    ResolvedId,
    TerseIdError,
    child_id,
    find_matching_ids,
    generate_id,
    hash_bytes,
    id_depth,
    is_child_id,
    is_valid_id_format,
    normalize_id,
    optimal_length,
    parse_id,
    validate_prefix,
)

__all__ = [
    "__version__",
    "IdConfig",
    "ResolverConfig",
    "load_id_config",
    "load_resolver_config",
    "IdGenerator",
    "generate_id",
    "hash_bytes",
    "optimal_length",
    "IdResolver",
    "ResolvedId",
    "MatchType",
    "find_matching_ids",
    "ParsedId",
    "parse_id",
    "is_valid_id_format",
    "normalize_id",
    "validate_prefix",
    "child_id",
    "is_child_id",
    "id_depth",
    "TerseIdError",
    "InvalidIdError",
    "PrefixMismatchError",
    "AmbiguousIdError",
    "NotFoundError",
]
