"""
Value objects for parsed and resolved IDs.

ID Format:
    <prefix>-<hash>[.<child>]*

Examples:
    - Root:        bd-a7x3q9
    - Child:       bd-a7x3q9.1
    - Grandchild:  bd-a7x3q9.1.3
    - Hyphenated:  my-proj-a7x3q9

The hash segment is 3-12 base36 characters. At 4+ characters it must
contain a digit, which keeps English words in hyphenated prefixes
("my-proj") from being mistaken for a hash.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from terseid.core.config.models import PREFIX_PATTERN
from terseid.core.ids.exceptions import InvalidIdError
from terseid.core.ids.hashing import BASE36_ALPHABET

MIN_HASH_SEGMENT_LENGTH = 3
MAX_HASH_SEGMENT_LENGTH = 12

# Child segments are unsigned 32-bit integers
MAX_CHILD_SEGMENT = 2**32 - 1

_BASE36_CHARS = frozenset(BASE36_ALPHABET)


def is_valid_hash_segment(segment: str) -> bool:
    """
    Check whether ``segment`` is a syntactically valid hash segment.

    Examples:
        >>> is_valid_hash_segment("abc")
        True
        >>> is_valid_hash_segment("proj")
        False
        >>> is_valid_hash_segment("a7x3q9")
        True
    """
    if not MIN_HASH_SEGMENT_LENGTH <= len(segment) <= MAX_HASH_SEGMENT_LENGTH:
        return False
    if not all(c in _BASE36_CHARS for c in segment):
        return False
    return len(segment) == MIN_HASH_SEGMENT_LENGTH or any(c.isdigit() for c in segment)


def render_id(prefix: str, hash: str, child_path: tuple[int, ...] | list[int] = ()) -> str:
    """
    Render ID parts as ``prefix-hash`` followed by ``.segment`` per child.

    Example:
        >>> render_id("bd", "a7x3q9", [1, 3])
        'bd-a7x3q9.1.3'
    """
    return f"{prefix}-{hash}" + "".join(f".{segment}" for segment in child_path)


class ParsedId(BaseModel):
    """
    Structured form of an ID string.

    Produced by parse_id and discarded after use. ``child_path`` is the
    ordered position below the root; it is empty for root IDs.
    """

    prefix: str
    hash: str
    child_path: tuple[int, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Validate prefix is non-empty and lowercase."""
        if not v:
            raise ValueError("Prefix must not be empty")
        if v != v.lower():
            raise ValueError("Prefix must be lowercase")
        if not PREFIX_PATTERN.match(v):
            raise ValueError(f"Prefix must be letters/digits joined by single hyphens, got {v!r}")
        return v

    @field_validator("hash")
    @classmethod
    def validate_hash(cls, v: str) -> str:
        """Validate hash against the hash segment rules."""
        if not is_valid_hash_segment(v):
            raise ValueError(
                "Hash must be 3-12 base36 characters, with a digit when 4+ long"
            )
        return v

    @field_validator("child_path")
    @classmethod
    def validate_child_path(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Validate every child segment fits in an unsigned 32-bit integer."""
        for segment in v:
            if not 0 <= segment <= MAX_CHILD_SEGMENT:
                raise ValueError(f"Child segment out of range: {segment}")
        return v

    def is_root(self) -> bool:
        """True if this ID has no child path."""
        return not self.child_path

    def depth(self) -> int:
        """Number of child path segments (0 for a root ID)."""
        return len(self.child_path)

    def parent(self) -> str | None:
        """
        Return the parent ID string, or None for a root ID.

        Example:
            >>> ParsedId(prefix="bd", hash="a7x", child_path=(1, 3)).parent()
            'bd-a7x.1'
        """
        if self.is_root():
            return None
        return render_id(self.prefix, self.hash, self.child_path[:-1])

    def child(self, number: int) -> "ParsedId":
        """Return the ID one level below this one with ``number`` appended."""
        if not 0 <= number <= MAX_CHILD_SEGMENT:
            raise ValueError(f"Child number must be within 0..{MAX_CHILD_SEGMENT}, got {number}")
        return self.model_copy(update={"child_path": (*self.child_path, number)})

    def to_id_string(self) -> str:
        """Render as ``prefix-hash[.child]*``."""
        return render_id(self.prefix, self.hash, self.child_path)

    def is_child_of(self, candidate: str) -> bool:
        """
        True if ``candidate`` is an ancestor of this ID.

        The candidate must share prefix and hash, and its child path must be
        a strict leading part of this ID's child path. Unparseable
        candidates are never ancestors.
        """
        from terseid.core.ids.parser import parse_id

        try:
            ancestor = parse_id(candidate)
        except InvalidIdError:
            return False

        if (ancestor.prefix, ancestor.hash) != (self.prefix, self.hash):
            return False
        if ancestor.depth() >= self.depth():
            return False
        return self.child_path[: ancestor.depth()] == ancestor.child_path

    def __str__(self) -> str:
        """Format as prefix-hash[.child]*"""
        return self.to_id_string()


class MatchType(str, Enum):
    """Which resolution stage produced a ResolvedId."""

    EXACT = "exact"
    PREFIX_NORMALIZED = "prefix_normalized"
    SUBSTRING = "substring"


class ResolvedId(BaseModel):
    """
    Result of resolving user input to a canonical ID.

    Attributes:
        id: The canonical ID
        match_type: The stage that matched
        original_input: The caller's text exactly as given
    """

    id: str
    match_type: MatchType
    original_input: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.id
