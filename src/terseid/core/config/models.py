"""
Configuration data models for terseid.

These models are built once by the host application (directly or through
the layered loader) and shared read-only by every generator and resolver.
All of them are frozen Pydantic models.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Hash segments are capped at 12 characters by the ID grammar
MAX_HASH_LENGTH = 12

# Lowercase base36 words joined by single hyphens: bd, tk, my-proj
PREFIX_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def _check_prefix(v: str) -> str:
    if not PREFIX_PATTERN.match(v):
        raise ValueError(
            f"Prefix must be lowercase letters/digits joined by single hyphens, got {v!r}"
        )
    return v


class IdConfig(BaseModel):
    """
    Settings for ID generation.

    Example:
        >>> config = IdConfig(prefix="bd")
        >>> (config.min_hash_length, config.max_hash_length)
        (3, 8)
        >>> IdConfig(prefix="tk", min_hash_length=4, max_collision_prob=0.10)
        IdConfig(prefix='tk', min_hash_length=4, max_hash_length=8, max_collision_prob=0.1)
    """

    prefix: str = Field(..., description="Namespace prepended to every generated ID")
    min_hash_length: int = Field(
        default=3,
        ge=1,
        description="Shortest hash segment the generator will emit",
    )
    max_hash_length: int = Field(
        default=8,
        ge=1,
        le=MAX_HASH_LENGTH,
        description="Longest hash segment used before the long fallback",
    )
    max_collision_prob: float = Field(
        default=0.25,
        gt=0.0,
        le=1.0,
        description="Birthday-bound collision probability the length must stay under",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Validate the prefix is a usable ID namespace."""
        return _check_prefix(v)

    @model_validator(mode="after")
    def validate_length_bounds(self) -> "IdConfig":
        """Validate that min_hash_length <= max_hash_length."""
        if self.min_hash_length > self.max_hash_length:
            raise ValueError(
                f"min_hash_length ({self.min_hash_length}) must not exceed "
                f"max_hash_length ({self.max_hash_length})"
            )
        return self


class ResolverConfig(BaseModel):
    """
    Settings for resolving user-typed references to canonical IDs.

    ``default_prefix`` is prepended to bare hashes ("a7x" -> "bd-a7x").
    ``allowed_prefixes`` lists foreign namespaces accepted by prefix checks
    in addition to the default one.
    """

    default_prefix: str = Field(..., description="Prefix used for bare hash input")
    allowed_prefixes: tuple[str, ...] = Field(
        default=(),
        description="Additional prefixes accepted by check_prefix",
    )
    allow_substring_match: bool = Field(
        default=True,
        description="Enable the hash substring matching stage",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("default_prefix")
    @classmethod
    def validate_default_prefix(cls, v: str) -> str:
        """Validate the default prefix."""
        return _check_prefix(v)

    @field_validator("allowed_prefixes")
    @classmethod
    def validate_allowed_prefixes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate every allowed prefix."""
        for prefix in v:
            _check_prefix(prefix)
        return v
