# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Superconducting architecture."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rustworkx as rx

from .arch import Arch
from .coupling import (
    adjacency_masks,
    get_qubit_list,
    induced_coupling_map,
    undirected_graph,
    validate_coupling_map,
)
from .distance import diameter, distance_table
from .fidelity import DEFAULT_REFERENCE_GATE, select_highest_fidelity, subset_fidelity
from .permutation import minimum_number_of_swaps
from .subsets import connected_subset_masks, connected_subsets, sorted_subsets

if TYPE_CHECKING:
    from collections.abc import Iterable

    import numpy as np

    from ..types import CouplingMap
    from .properties import Properties

logger = logging.getLogger(__name__)


class Architecture:
    """A superconducting device given by its qubits, coupling map and optional calibration data.

    An architecture is empty until one of the ``load`` methods is called. Every load replaces the complete
    state of the architecture. All queries are read-only.
    """

    get_qubit_list = staticmethod(get_qubit_list)
    minimum_number_of_swaps = staticmethod(minimum_number_of_swaps)

    def __init__(
        self,
        num_qubits: int | None = None,
        coupling_map: Iterable[tuple[int, int]] | None = None,
        properties: Properties | None = None,
        *,
        name: str = "",
        reference_gate: str = DEFAULT_REFERENCE_GATE,
    ) -> None:
        """Create an architecture.

        Args:
            num_qubits: The number of qubits. If given, the architecture is loaded right away.
            coupling_map: The edges of the device. Defaults to no edges.
            properties: The calibration data of the device.
            name: The name of the device.
            reference_gate: The single-qubit gate whose error rate represents a qubit in fidelity scores.
        """
        self._reference_gate = reference_gate
        self._reset()
        if num_qubits is not None:
            self.load(num_qubits, coupling_map if coupling_map is not None else set(), properties, name=name)
        else:
            self._name = name

    def _reset(self) -> None:
        self._name = ""
        self._num_qubits = 0
        self._coupling_map: CouplingMap = set()
        self._properties: Properties | None = None
        self._adjacency: list[int] = []
        self._graph: rx.PyGraph | None = None
        self._loaded = False

    def load(
        self,
        num_qubits: int,
        coupling_map: Iterable[tuple[int, int]],
        properties: Properties | None = None,
        name: str = "",
    ) -> None:
        """Load an architecture from in-memory values, replacing the current state.

        Args:
            num_qubits: The number of qubits.
            coupling_map: The edges of the device.
            properties: The calibration data of the device.
            name: The name of the device.

        Raises:
            ValueError: If there are no qubits, the coupling map is malformed or the calibration data belongs
                to a different number of qubits.
        """
        if num_qubits < 1:
            msg = f"An architecture needs at least one qubit, got {num_qubits}."
            raise ValueError(msg)
        validated = validate_coupling_map(num_qubits, coupling_map)
        if properties is not None and properties.num_qubits != num_qubits:
            msg = f"The calibration data covers {properties.num_qubits} qubits, but the architecture has {num_qubits}."
            raise ValueError(msg)

        self._reset()
        self._name = name
        self._num_qubits = num_qubits
        self._coupling_map = validated
        self._properties = properties.copy() if properties is not None else None
        self._adjacency = adjacency_masks(num_qubits, validated)
        self._graph = undirected_graph(num_qubits, validated)
        self._loaded = True

        touched = len(get_qubit_list(validated))
        if touched != num_qubits:
            logger.warning("The coupling map only touches %d of %d qubits.", touched, num_qubits)
        logger.debug(
            "Loaded architecture '%s' with %d qubits and %d edges.", self._name, num_qubits, len(validated)
        )

    def load_coupling_map(self, arch: Arch | str | int, coupling_map: Iterable[tuple[int, int]] | None = None) -> None:
        """Load a coupling map, replacing the current state.

        Args:
            arch: Either a built-in architecture (or its name) or the number of qubits.
            coupling_map: The edges of the device if ``arch`` is a number of qubits.

        Raises:
            ValueError: If the architecture name is unknown or the coupling map is malformed.
            TypeError: If the arguments do not match one of the two forms.
        """
        if isinstance(arch, str):
            try:
                arch = Arch(arch)
            except ValueError:
                msg = f"Unknown architecture '{arch}'."
                raise ValueError(msg) from None
        if isinstance(arch, Arch):
            if coupling_map is not None:
                msg = "A built-in architecture cannot be combined with a coupling map."
                raise TypeError(msg)
            self.load(arch.num_qubits, arch.coupling_map, name=arch.value)
        elif isinstance(arch, int):
            if coupling_map is None:
                msg = "Loading a coupling map by qubit count requires the coupling map."
                raise TypeError(msg)
            self.load(arch, coupling_map)
        else:
            msg = f"Architecture type {type(arch)} not supported."
            raise TypeError(msg)

    def load_properties(self, properties: Properties, name: str = "") -> None:
        """Load calibration data, replacing the current state.

        The coupling map consists of all qubit pairs that carry a two-qubit error rate.

        Args:
            properties: The calibration data of the device.
            name: The name of the device.
        """
        self.load(properties.num_qubits, properties.coupling_map(), properties, name=name)

    def _check_loaded(self) -> None:
        if not self._loaded:
            msg = "No architecture has been loaded."
            raise RuntimeError(msg)

    def _check_subset_size(self, size: int) -> None:
        self._check_loaded()
        if not 1 <= size <= self._num_qubits:
            msg = f"The subset size {size} is not in [1, {self._num_qubits}]."
            raise ValueError(msg)

    @property
    def name(self) -> str:
        """The name of the device."""
        return self._name

    @property
    def num_qubits(self) -> int:
        """The number of qubits."""
        return self._num_qubits

    @property
    def coupling_map(self) -> CouplingMap:
        """A copy of the coupling map."""
        return set(self._coupling_map)

    @property
    def properties(self) -> Properties | None:
        """A copy of the calibration data, if any."""
        return self._properties.copy() if self._properties is not None else None

    @property
    def reference_gate(self) -> str:
        """The single-qubit gate whose error rate represents a qubit in fidelity scores."""
        return self._reference_gate

    @property
    def bidirectional(self) -> bool:
        """Whether every edge of the coupling map is present in both directions."""
        self._check_loaded()
        return all((target, control) in self._coupling_map for control, target in self._coupling_map)

    def is_loaded(self) -> bool:
        """Check whether an architecture has been loaded."""
        return self._loaded

    def is_edge_connected(self, control: int, target: int) -> bool:
        """Check whether a two-qubit gate may act on two qubits in at least one direction."""
        self._check_loaded()
        return (control, target) in self._coupling_map or (target, control) in self._coupling_map

    def is_edge_bidirectional(self, control: int, target: int) -> bool:
        """Check whether a two-qubit gate may act on two qubits in both directions."""
        self._check_loaded()
        return (control, target) in self._coupling_map and (target, control) in self._coupling_map

    def is_connected(self) -> bool:
        """Check whether every qubit can reach every other qubit."""
        self._check_loaded()
        return rx.is_connected(self._graph)

    def get_all_connected_subsets(self, size: int) -> set[frozenset[int]]:
        """Get all qubit subsets of a given size that are connected by the coupling map.

        Edge directions are ignored.

        Args:
            size: The number of qubits per subset.

        Returns:
            The connected subsets.

        Raises:
            ValueError: If the size is not in [1, num_qubits].
            RuntimeError: If no architecture has been loaded.
        """
        self._check_subset_size(size)
        return connected_subsets(self._adjacency, size)

    def get_reduced_coupling_maps(self, size: int) -> list[CouplingMap]:
        """Get the coupling maps induced by every connected qubit subset of a given size.

        Args:
            size: The number of qubits per subset.

        Returns:
            One coupling map per connected subset, ordered lexicographically by the sorted subsets.

        Raises:
            ValueError: If the size is not in [1, num_qubits].
            RuntimeError: If no architecture has been loaded.
        """
        self._check_subset_size(size)
        subsets = sorted_subsets(connected_subset_masks(self._adjacency, size))
        return [induced_coupling_map(self._coupling_map, subset) for subset in subsets]

    def get_highest_fidelity_coupling_map(self, size: int) -> CouplingMap:
        """Get the coupling map induced by the connected qubit subset of a given size with the highest fidelity.

        Subsets are scored by :meth:`get_fidelity`. Ties are broken in favor of the lexicographically smallest
        sorted subset.

        Args:
            size: The number of qubits of the subset.

        Returns:
            The coupling map restricted to the best subset, or an empty map if no subset is connected.

        Raises:
            ValueError: If the size is not in [1, num_qubits].
            RuntimeError: If no architecture has been loaded.
        """
        self._check_subset_size(size)
        candidates = sorted_subsets(connected_subset_masks(self._adjacency, size))
        best = select_highest_fidelity(candidates, self._coupling_map, self._properties, self._reference_gate)
        if best is None:
            return set()
        return induced_coupling_map(self._coupling_map, best)

    def get_fidelity(self, qubits: Iterable[int]) -> float:
        """Get the expected fidelity of a qubit subset.

        The fidelity is the product of ``1 - e`` over the reference gate error of every qubit in the subset and
        over the two-qubit error of every coupling map edge inside the subset.

        Raises:
            RuntimeError: If no architecture has been loaded.
        """
        self._check_loaded()
        return subset_fidelity(qubits, self._coupling_map, self._properties, self._reference_gate)

    def get_distance_table(self) -> np.ndarray:
        """Get the hop distance between every pair of qubits, ignoring edge directions.

        Raises:
            RuntimeError: If no architecture has been loaded.
        """
        self._check_loaded()
        return distance_table(self._graph)

    def get_coupling_limit(self) -> int:
        """Get the largest distance between any two qubits, i.e., the diameter of the connectivity graph.

        Raises:
            RuntimeError: If no architecture has been loaded or the connectivity graph is not connected.
        """
        self._check_loaded()
        return diameter(self._graph)

    def __repr__(self) -> str:
        return f"Architecture(name={self._name!r}, num_qubits={self._num_qubits}, edges={len(self._coupling_map)})"
