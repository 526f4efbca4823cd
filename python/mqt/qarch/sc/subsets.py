# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Enumeration of connected qubit subsets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .coupling import from_mask

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def connected_subset_masks(adjacency: Sequence[int], size: int) -> set[int]:
    """Enumerate all connected vertex subsets of a given size.

    Subsets are grown from every single vertex by adding one neighbor of the current subset at a time.
    Every subset reached once is recorded, so a subset that can be grown in several orders is only
    expanded the first time it is reached.

    Args:
        adjacency: The undirected neighborhood of every vertex as a bitmask.
        size: The number of vertices per subset.

    Returns:
        The bitmasks of all connected subsets with ``size`` vertices.
    """
    seen: set[int] = set()
    found: set[int] = set()
    for start in range(len(adjacency)):
        root = 1 << start
        if root in seen:
            continue
        seen.add(root)
        # each entry holds a subset, its vertex count, and the neighbors outside of it
        stack = [(root, 1, adjacency[start] & ~root)]
        while stack:
            subset, count, frontier = stack.pop()
            if count == size:
                found.add(subset)
                continue
            candidates = frontier
            while candidates:
                lowest = candidates & -candidates
                candidates ^= lowest
                grown = subset | lowest
                if grown in seen:
                    continue
                seen.add(grown)
                neighbors = adjacency[lowest.bit_length() - 1]
                stack.append((grown, count + 1, (frontier | neighbors) & ~grown))
    logger.debug("Found %d connected subsets of size %d.", len(found), size)
    return found


def connected_subsets(adjacency: Sequence[int], size: int) -> set[frozenset[int]]:
    """Enumerate all connected vertex subsets of a given size as sets of vertices."""
    return {from_mask(mask) for mask in connected_subset_masks(adjacency, size)}


def sorted_subsets(masks: set[int]) -> list[tuple[int, ...]]:
    """Sort subset bitmasks by the lexicographic order of their sorted vertex indices."""
    return sorted(tuple(sorted(from_mask(mask))) for mask in masks)
