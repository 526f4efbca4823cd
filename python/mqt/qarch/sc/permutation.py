# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Routing of permutations with a minimum number of swaps."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..types import Permutation, Swap


def check_permutation(permutation: Sequence[int]) -> None:
    """Check that a sequence of length ``L`` contains every value of ``range(L)`` exactly once.

    Raises:
        ValueError: If a value is duplicated or out of range.
    """
    length = len(permutation)
    present = [False] * length
    for position, value in enumerate(permutation):
        if not 0 <= value < length:
            msg = f"Value {value} at position {position} is not in [0, {length})."
            raise ValueError(msg)
        if present[value]:
            msg = f"Value {value} occurs more than once in the permutation {list(permutation)}."
            raise ValueError(msg)
        present[value] = True


def cycle_decomposition(permutation: Sequence[int]) -> list[list[int]]:
    """Decompose a permutation into its disjoint cycles.

    Each cycle starts at its smallest position and lists the positions visited by repeatedly following
    ``position -> permutation[position]``. Fixed points form cycles of length one.

    Raises:
        ValueError: If the input is not a permutation.
    """
    check_permutation(permutation)
    visited = [False] * len(permutation)
    cycles = []
    for start in range(len(permutation)):
        if visited[start]:
            continue
        cycle = []
        position = start
        while not visited[position]:
            visited[position] = True
            cycle.append(position)
            position = permutation[position]
        cycles.append(cycle)
    return cycles


def minimum_number_of_swaps(permutation: Permutation) -> list[Swap]:
    """Sort a permutation with the minimum number of pairwise exchanges.

    The permutation is sorted in place. Every cycle of length ``m`` is resolved with ``m - 1`` swaps by
    repeatedly exchanging the element at the first position of the cycle with the position it belongs to.
    Applying the returned swaps in order to the original permutation yields the identity.

    Args:
        permutation: The permutation to sort. It is the identity afterwards.

    Returns:
        The exchanged pairs of positions in the order they were applied.

    Raises:
        ValueError: If the input is not a permutation. The input is left untouched in that case.
    """
    check_permutation(permutation)
    visited = [False] * len(permutation)
    swaps: list[Swap] = []
    for start in range(len(permutation)):
        if visited[start]:
            continue
        visited[start] = True
        while permutation[start] != start:
            target = permutation[start]
            visited[target] = True
            permutation[start], permutation[target] = permutation[target], permutation[start]
            swaps.append((start, target))
    return swaps
