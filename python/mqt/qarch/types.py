# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Module for types."""

from __future__ import annotations

from typing import TypeAlias

Edge: TypeAlias = tuple[int, int]
"""A directed pair of physical qubits (control, target) a two-qubit gate may act on."""

CouplingMap: TypeAlias = set[Edge]
"""The set of allowed two-qubit gate directions of a device."""

Permutation: TypeAlias = list[int]
"""A target placement of ``L`` items into ``L`` positions, i.e., a bijection on ``range(L)``."""

Swap: TypeAlias = Edge
"""A pair of positions whose contents are exchanged."""
