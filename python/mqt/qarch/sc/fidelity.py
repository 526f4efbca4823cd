# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Fidelity based selection of qubit subsets."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from .coupling import induced_coupling_map

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..types import CouplingMap
    from .properties import Properties

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_GATE = "x"
"""The single-qubit gate whose error rate represents a qubit when scoring subsets."""

SCORE_TOLERANCE = 1e-9
"""Relative difference below which two subset fidelities count as equal."""


def subset_fidelity(
    qubits: Iterable[int],
    coupling_map: CouplingMap,
    properties: Properties | None,
    reference_gate: str = DEFAULT_REFERENCE_GATE,
) -> float:
    """Compute the expected fidelity of a qubit subset.

    The fidelity is the product of ``1 - e`` over the reference gate error ``e`` of every qubit in the
    subset and over the two-qubit error ``e`` of every coupling map edge inside the subset.

    Args:
        qubits: The qubits of the subset.
        coupling_map: The coupling map of the device.
        properties: The calibration data of the device. Without calibration data every subset has fidelity 1.
        reference_gate: The name of the single-qubit gate scored per qubit.

    Returns:
        The fidelity in [0, 1].
    """
    if properties is None:
        return 1.0
    subset = set(qubits)
    factors = [1.0 - properties.get_single_qubit_error_rate(qubit, reference_gate) for qubit in subset]
    factors.extend(
        1.0 - properties.get_two_qubit_error_rate(control, target)
        for control, target in induced_coupling_map(coupling_map, subset)
    )
    # multiplying in sorted order makes equal multisets of factors score identically
    return math.prod(sorted(factors))


def select_highest_fidelity(
    candidates: Iterable[tuple[int, ...]],
    coupling_map: CouplingMap,
    properties: Properties | None,
    reference_gate: str = DEFAULT_REFERENCE_GATE,
) -> tuple[int, ...] | None:
    """Select the candidate subset with the highest fidelity.

    Among equally scored subsets the lexicographically smallest sorted subset wins.

    Args:
        candidates: The subsets to choose from, each given by its sorted qubit indices.
        coupling_map: The coupling map of the device.
        properties: The calibration data of the device.
        reference_gate: The name of the single-qubit gate scored per qubit.

    Returns:
        The best subset or ``None`` if there are no candidates.
    """
    best: tuple[int, ...] | None = None
    best_fidelity = -1.0
    for candidate in candidates:
        fidelity = subset_fidelity(candidate, coupling_map, properties, reference_gate)
        if math.isclose(fidelity, best_fidelity, rel_tol=SCORE_TOLERANCE, abs_tol=0.0):
            if best is not None and candidate < best:
                best = candidate
        elif fidelity > best_fidelity:
            best = candidate
            best_fidelity = fidelity
    if best is not None:
        logger.debug("Selected qubits %s with fidelity %g.", list(best), best_fidelity)
    return best
