# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Built-in superconducting architectures."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import CouplingMap, Edge


def _bidirectional(edges: list[Edge]) -> CouplingMap:
    return {edge for control, target in edges for edge in ((control, target), (target, control))}


class Arch(Enum):
    """Enumeration of the built-in superconducting architectures."""

    IBM_QX4 = "IBM_QX4"
    """
    5-qubit IBM QX4 (Tenerife) with unidirectional couplings
    """
    IBMQ_Yorktown = "IBMQ_Yorktown"
    """
    5-qubit IBMQ Yorktown (bow tie)
    """
    IBMQ_London = "IBMQ_London"
    """
    5-qubit IBMQ London (T shape)
    """
    IBMQ_Bogota = "IBMQ_Bogota"
    """
    5-qubit IBMQ Bogota (linear chain)
    """
    IBMQ_Casablanca = "IBMQ_Casablanca"
    """
    7-qubit IBMQ Casablanca (H shape)
    """
    Rigetti_Agave = "Rigetti_Agave"
    """
    8-qubit Rigetti Agave (ring)
    """

    @property
    def num_qubits(self) -> int:
        """The number of qubits of the architecture."""
        return _ARCHITECTURES[self][0]

    @property
    def coupling_map(self) -> CouplingMap:
        """A copy of the coupling map of the architecture."""
        return set(_ARCHITECTURES[self][1])


_ARCHITECTURES: dict[Arch, tuple[int, CouplingMap]] = {
    Arch.IBM_QX4: (5, {(1, 0), (2, 0), (2, 1), (3, 2), (3, 4), (2, 4)}),
    Arch.IBMQ_Yorktown: (5, _bidirectional([(0, 1), (0, 2), (1, 2), (2, 3), (2, 4), (3, 4)])),
    Arch.IBMQ_London: (5, _bidirectional([(0, 1), (1, 2), (1, 3), (3, 4)])),
    Arch.IBMQ_Bogota: (5, _bidirectional([(0, 1), (1, 2), (2, 3), (3, 4)])),
    Arch.IBMQ_Casablanca: (7, _bidirectional([(0, 1), (1, 2), (1, 3), (3, 5), (4, 5), (5, 6)])),
    Arch.Rigetti_Agave: (8, _bidirectional([(i, (i + 1) % 8) for i in range(8)])),
}
