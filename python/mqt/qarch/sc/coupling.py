# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Graph primitives on coupling maps."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rustworkx as rx

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..types import CouplingMap


def get_qubit_list(coupling_map: CouplingMap) -> list[int]:
    """Get the qubits that are part of at least one edge of a coupling map.

    Args:
        coupling_map: The coupling map to inspect.

    Returns:
        The qubit indices in ascending order without duplicates.
    """
    return sorted({qubit for edge in coupling_map for qubit in edge})


def get_fully_connected_map(num_qubits: int) -> CouplingMap:
    """Get the coupling map in which every ordered pair of distinct qubits is connected.

    Args:
        num_qubits: The number of qubits.

    Returns:
        The coupling map with ``num_qubits * (num_qubits - 1)`` edges.
    """
    return {(i, j) for i in range(num_qubits) for j in range(num_qubits) if i != j}


def validate_coupling_map(num_qubits: int, coupling_map: Iterable[tuple[int, int]]) -> CouplingMap:
    """Check a coupling map against a qubit count and normalize it to a set of edges.

    Args:
        num_qubits: The number of qubits of the device.
        coupling_map: The edges of the device.

    Returns:
        The coupling map as a set of integer pairs.

    Raises:
        ValueError: If an edge references a qubit outside ``range(num_qubits)`` or connects a qubit to itself.
    """
    validated: CouplingMap = set()
    for control, target in coupling_map:
        if not (0 <= control < num_qubits and 0 <= target < num_qubits):
            msg = f"Edge ({control}, {target}) references a qubit outside of [0, {num_qubits})."
            raise ValueError(msg)
        if control == target:
            msg = f"Edge ({control}, {target}) connects a qubit to itself."
            raise ValueError(msg)
        validated.add((int(control), int(target)))
    return validated


def adjacency_masks(num_qubits: int, coupling_map: CouplingMap) -> list[int]:
    """Get the undirected neighborhood of every qubit as a bitmask.

    Bit ``j`` of entry ``i`` is set iff ``(i, j)`` or ``(j, i)`` is part of the coupling map.
    """
    masks = [0] * num_qubits
    for control, target in coupling_map:
        masks[control] |= 1 << target
        masks[target] |= 1 << control
    return masks


def undirected_graph(num_qubits: int, coupling_map: CouplingMap) -> rx.PyGraph:
    """Get the undirected connectivity graph of a coupling map.

    Both directions of an edge collapse into a single undirected edge.
    """
    graph = rx.PyGraph(multigraph=False)
    graph.add_nodes_from(range(num_qubits))
    graph.add_edges_from_no_data([(min(edge), max(edge)) for edge in coupling_map])
    return graph


def induced_coupling_map(coupling_map: CouplingMap, qubits: Iterable[int]) -> CouplingMap:
    """Get the edges of a coupling map whose endpoints both lie in a set of qubits.

    The direction of each edge is kept as in the original map.
    """
    subset = set(qubits)
    return {edge for edge in coupling_map if edge[0] in subset and edge[1] in subset}


def from_mask(mask: int) -> frozenset[int]:
    """Decode a bitmask into the set of qubits it contains."""
    qubits = []
    qubit = 0
    while mask:
        if mask & 1:
            qubits.append(qubit)
        mask >>= 1
        qubit += 1
    return frozenset(qubits)
