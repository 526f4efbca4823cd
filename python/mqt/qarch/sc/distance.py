# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Shortest path distances on the connectivity graph."""

from __future__ import annotations

import numpy as np
import rustworkx as rx


def distance_table(graph: rx.PyGraph) -> np.ndarray:
    """Get the hop distance between every pair of qubits.

    Args:
        graph: The undirected connectivity graph.

    Returns:
        A square matrix of distances with ``inf`` for pairs that are not connected.
    """
    if graph.num_nodes() == 0:
        return np.zeros((0, 0))
    table = np.array(rx.distance_matrix(graph, null_value=np.inf), dtype=float)
    np.fill_diagonal(table, 0.0)
    return table


def diameter(graph: rx.PyGraph) -> int:
    """Get the largest shortest path distance between any two qubits.

    Args:
        graph: The undirected connectivity graph.

    Returns:
        The diameter of the graph.

    Raises:
        RuntimeError: If the graph is empty or not connected.
    """
    if graph.num_nodes() == 0:
        msg = "The diameter of an empty graph is undefined."
        raise RuntimeError(msg)
    if not rx.is_connected(graph):
        msg = "The connectivity graph is not connected, some qubits are infinitely far apart."
        raise RuntimeError(msg)
    return int(distance_table(graph).max())
