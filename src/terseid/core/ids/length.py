"""
Adaptive hash length selection.

Hash segments start short and grow as the collection grows. The length is
the shortest one whose birthday-problem collision estimate,

    P(collision) ~= 1 - exp(-n^2 / (2 * 36^L)),

stays below the configured threshold.
"""

import math


def collision_probability(item_count: int, hash_length: int) -> float:
    """
    Estimate the chance of any collision among ``item_count`` random hashes.

    Example:
        >>> round(collision_probability(200, 3), 3)
        0.349
    """
    space = float(36**hash_length)
    return -math.expm1(-(float(item_count) ** 2) / (2.0 * space))


def optimal_length(
    item_count: int,
    min_length: int,
    max_length: int,
    max_collision_prob: float,
) -> int:
    """
    Pick the shortest hash length that keeps collisions unlikely.

    Returns the smallest L in [min_length, max_length] whose collision
    estimate is below ``max_collision_prob``; saturates at ``max_length``
    when none is. Non-decreasing in ``item_count``.

    Args:
        item_count: Number of IDs that already exist
        min_length: Shortest permitted hash length
        max_length: Longest permitted hash length
        max_collision_prob: Upper bound on the collision estimate

    Returns:
        Hash length to use

    Example:
        >>> optimal_length(0, 3, 8, 0.25)
        3
        >>> optimal_length(200, 3, 8, 0.25)
        4
        >>> optimal_length(7000, 3, 8, 0.25)
        6
    """
    if item_count <= 1:
        return min_length

    for length in range(min_length, max_length + 1):
        if collision_probability(item_count, length) < max_collision_prob:
            return length

    return max_length
