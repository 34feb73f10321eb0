"""
ID generator with adaptive length and collision avoidance.

This module provides the primary API for creating new IDs. The caller
supplies the seed bytes (content plus a nonce) and an existence check
against its own storage; the generator escalates through four tiers
until it finds a free candidate:

    1. Nonce escalation: nonces 0-9 at the optimal length
    2. Length extension: each longer length up to max_hash_length, nonces 0-9
    3. Long fallback: 12-character hashes, nonces 0-1000
    4. Desperate fallback: 12-character hash of nonce 1001 with "-1001"
       appended, returned without an existence check

Candidates whose hash segment would not parse back (for example a 4+
character hash with no digit) are skipped as if taken.

Generation is not atomic across callers: two concurrent callers can both
see a candidate as free. Callers that need exactly-once allocation must
serialize generate() or make their storage insert the final check.

Example:
    >>> from terseid.core.config import IdConfig
    >>> generator = IdGenerator(IdConfig(prefix="bd"))
    >>> new_id = generator.generate(
    ...     lambda nonce: f"Fix login bug{nonce}".encode(),
    ...     item_count=0,
    ...     exists=lambda candidate: False,
    ... )
    >>> len(new_id)
    6
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from terseid.core.config.models import IdConfig
from terseid.core.ids.hashing import hash_bytes
from terseid.core.ids.length import optimal_length
from terseid.core.ids.models import is_valid_hash_segment

logger = logging.getLogger(__name__)

SeedFn = Callable[[int], bytes]
ExistsFn = Callable[[str], bool]

# Tier 1/2: nonces tried per length
NONCES_PER_LENGTH = 10

# Tier 3: long hashes, nonces 0..LONG_FALLBACK_MAX_NONCE inclusive
LONG_FALLBACK_LENGTH = 12
LONG_FALLBACK_MAX_NONCE = 1000

# Tier 4: first nonce past the long fallback, also used as the literal suffix
DESPERATE_NONCE = LONG_FALLBACK_MAX_NONCE + 1


class IdGenerator:
    """
    Generates short IDs that grow with the collection.

    The generator holds only its immutable IdConfig and may be shared
    freely between threads.
    """

    def __init__(self, config: IdConfig) -> None:
        self._config = config

    @property
    def config(self) -> IdConfig:
        return self._config

    @property
    def prefix(self) -> str:
        return self._config.prefix

    def optimal_length(self, item_count: int) -> int:
        """Hash length for a collection of ``item_count`` IDs under this config."""
        return optimal_length(
            item_count,
            self._config.min_hash_length,
            self._config.max_hash_length,
            self._config.max_collision_prob,
        )

    def candidate(self, seed: bytes | str, hash_length: int) -> str:
        """
        Build a ``prefix-hash`` candidate from seed bytes.

        Example:
            >>> IdGenerator(IdConfig(prefix="bd")).candidate(b"seed", 3).startswith("bd-")
            True
        """
        return f"{self._config.prefix}-{hash_bytes(seed, hash_length)}"

    def _try(self, seed_fn: SeedFn, nonce: int, hash_length: int, exists: ExistsFn) -> str | None:
        hash_part = hash_bytes(seed_fn(nonce), hash_length)
        if not is_valid_hash_segment(hash_part):
            return None
        candidate = f"{self._config.prefix}-{hash_part}"
        if exists(candidate):
            return None
        return candidate

    def generate(self, seed_fn: SeedFn, item_count: int, exists: ExistsFn) -> str:
        """
        Generate a new ID that ``exists`` reports as free.

        Args:
            seed_fn: Called with a nonce (0, 1, 2, ...); returns seed bytes.
                Different nonces must give different bytes.
            item_count: Number of IDs that already exist
            exists: Returns True if a candidate ID is already taken

        Returns:
            A new ID string. Only the desperate fallback skips the
            existence check.
        """
        length = self.optimal_length(item_count)

        for nonce in range(NONCES_PER_LENGTH):
            if found := self._try(seed_fn, nonce, length, exists):
                return found

        logger.debug(
            "No free %s ID at length %d, extending up to %d",
            self.prefix,
            length,
            self._config.max_hash_length,
        )
        for longer in range(length + 1, self._config.max_hash_length + 1):
            for nonce in range(NONCES_PER_LENGTH):
                if found := self._try(seed_fn, nonce, longer, exists):
                    return found

        logger.debug("Falling back to %d-char %s IDs", LONG_FALLBACK_LENGTH, self.prefix)
        for nonce in range(LONG_FALLBACK_MAX_NONCE + 1):
            if found := self._try(seed_fn, nonce, LONG_FALLBACK_LENGTH, exists):
                return found

        hash_part = hash_bytes(seed_fn(DESPERATE_NONCE), LONG_FALLBACK_LENGTH)
        desperate = f"{self._config.prefix}-{hash_part}-{DESPERATE_NONCE}"
        logger.warning(
            "All %s candidates collided; using unchecked fallback %s",
            self.prefix,
            desperate,
        )
        return desperate


def generate_id(
    config: IdConfig | str,
    content: bytes | str,
    item_count: int,
    exists: ExistsFn,
) -> str:
    """
    Generate an ID seeded from ``content`` followed by the decimal nonce.

    Args:
        config: An IdConfig, or a bare prefix to use with default settings
        content: Entity content (title, body, timestamp...) to hash
        item_count: Number of IDs that already exist
        exists: Returns True if a candidate ID is already taken

    Returns:
        A new ID string

    Example:
        >>> taken = {"bd-k2m"}
        >>> generate_id("bd", "Fix login bug", len(taken), taken.__contains__).startswith("bd-")
        True
    """
    if isinstance(config, str):
        config = IdConfig(prefix=config)
    if isinstance(content, str):
        content = content.encode("utf-8")

    def seed_fn(nonce: int) -> bytes:
        return content + str(nonce).encode("ascii")

    return IdGenerator(config).generate(seed_fn, item_count, exists)
