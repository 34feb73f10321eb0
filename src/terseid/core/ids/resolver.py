"""
Fuzzy resolution of user-typed ID references.

Users rarely type full IDs. The resolver trims and lowercases the input,
then tries each stage in order and stops at the first success:

    1. Exact: the input itself exists
    2. PrefixNormalized: input has no dash, ``<default_prefix>-<input>`` exists
    3. Substring: exactly one known ID has a hash segment containing the input
       (more than one raises AmbiguousIdError); skipped when disabled
    4. NotFoundError

Storage stays with the caller: existence and substring search are passed in
as functions. resolve_from() builds both from an in-memory list of IDs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from terseid.core.config.models import ResolverConfig
from terseid.core.ids.exceptions import AmbiguousIdError, InvalidIdError, NotFoundError
from terseid.core.ids.models import MatchType, ParsedId, ResolvedId
from terseid.core.ids.parser import parse_id, validate_prefix

logger = logging.getLogger(__name__)

ExistsFn = Callable[[str], bool]
SubstringMatchFn = Callable[[str], list[str]]


class IdResolver:
    """
    Resolves partial or abbreviated input to a canonical ID.

    Example:
        >>> resolver = IdResolver(ResolverConfig(default_prefix="bd"))
        >>> known = ["bd-a7x3q9", "bd-k2m"]
        >>> resolver.resolve_from("A7X", known).id
        'bd-a7x3q9'
    """

    def __init__(self, config: ResolverConfig) -> None:
        self._config = config

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(
        self,
        input: str,
        exists_fn: ExistsFn,
        substring_match_fn: SubstringMatchFn,
    ) -> ResolvedId:
        """
        Resolve user input to an ID.

        Args:
            input: Raw user input (surrounding whitespace and case are ignored)
            exists_fn: Returns True if an ID exists in the caller's storage
            substring_match_fn: Returns every known ID whose hash segment
                contains the given text (see find_matching_ids)

        Returns:
            The resolved ID with the stage that matched

        Raises:
            AmbiguousIdError: If the substring stage matched several IDs
            NotFoundError: If no stage matched
        """
        normalized = input.strip().lower()
        if not normalized:
            raise NotFoundError(normalized)

        if exists_fn(normalized):
            return self._resolved(normalized, MatchType.EXACT, input)

        if "-" not in normalized:
            prefixed = f"{self._config.default_prefix}-{normalized}"
            if exists_fn(prefixed):
                return self._resolved(prefixed, MatchType.PREFIX_NORMALIZED, input)

        if self._config.allow_substring_match:
            matches = list(substring_match_fn(normalized))
            if len(matches) == 1:
                return self._resolved(matches[0], MatchType.SUBSTRING, input)
            if len(matches) > 1:
                logger.debug("'%s' is ambiguous: %d matches", normalized, len(matches))
                raise AmbiguousIdError(partial=normalized, matches=matches)

        raise NotFoundError(normalized)

    def resolve_from(self, input: str, known_ids: Iterable[str]) -> ResolvedId:
        """
        Resolve against an in-memory collection of IDs.

        Args:
            input: Raw user input
            known_ids: Every ID currently in storage

        Returns:
            The resolved ID with the stage that matched
        """
        ids = list(known_ids)
        id_set = set(ids)
        return self.resolve(
            input,
            id_set.__contains__,
            lambda partial: find_matching_ids(ids, partial),
        )

    def check_prefix(self, id_str: str) -> ParsedId:
        """Validate an ID against the default prefix and allowed prefixes."""
        return validate_prefix(id_str, self._config.default_prefix, self._config.allowed_prefixes)

    @staticmethod
    def _resolved(id_str: str, match_type: MatchType, original_input: str) -> ResolvedId:
        logger.debug("Resolved '%s' to %s (%s)", original_input, id_str, match_type.value)
        return ResolvedId(id=id_str, match_type=match_type, original_input=original_input)


def find_matching_ids(all_ids: Iterable[str], hash_substring: str) -> list[str]:
    """
    Find IDs whose hash segment contains ``hash_substring``.

    Only the hash is searched; prefix and child path never match.
    Unparseable IDs are skipped and results are canonical, de-duplicated,
    in first-seen order.

    Example:
        >>> find_matching_ids(["bd-a7x3q9", "bd-a7xbb1", "bd-k2m.7"], "a7x")
        ['bd-a7x3q9', 'bd-a7xbb1']
    """
    needle = hash_substring.lower()
    matches: list[str] = []
    seen: set[str] = set()
    for id_str in all_ids:
        try:
            parsed = parse_id(id_str)
        except InvalidIdError:
            continue
        if needle not in parsed.hash:
            continue
        canonical = parsed.to_id_string()
        if canonical not in seen:
            seen.add(canonical)
            matches.append(canonical)
    return matches
