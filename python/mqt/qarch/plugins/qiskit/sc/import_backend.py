# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Import a superconducting architecture and its calibration from Qiskit."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ....sc import Architecture, Properties, get_fully_connected_map

if TYPE_CHECKING:
    from qiskit.providers import BackendV2
    from qiskit.transpiler.target import Target

    from ....types import CouplingMap, Edge

logger = logging.getLogger(__name__)


def import_target(target: Target, default_error_rate: float = 0.0) -> Properties:
    """Import the calibration data of a Qiskit Target.

    Every single-qubit instruction with a recorded error contributes its error rate for the qubit it acts on.
    Every qubit pair with a two-qubit instruction contributes the smallest error recorded for the pair, or the
    default error rate if none was recorded.

    Args:
        target: The target to import.
        default_error_rate: The error rate reported for entries without calibration data.

    Returns:
        The calibration data.
    """
    properties = Properties(target.num_qubits, default_error_rate=default_error_rate)
    two_qubit_errors: dict[Edge, float | None] = {}

    for operation_name in target.operation_names:
        for qargs, instruction_properties in target[operation_name].items():
            # globally defined instructions are not tied to specific qubits
            if qargs is None:
                continue
            error = instruction_properties.error if instruction_properties is not None else None
            if len(qargs) == 1:
                if error is not None:
                    properties.set_single_qubit_error_rate(qargs[0], operation_name, error)
            elif len(qargs) == 2:
                edge = (qargs[0], qargs[1])
                previous = two_qubit_errors.get(edge)
                if previous is None or (error is not None and error < previous):
                    two_qubit_errors[edge] = error

    for (control, target_qubit), error in two_qubit_errors.items():
        properties.set_two_qubit_error_rate(control, target_qubit, default_error_rate if error is None else error)

    logger.debug(
        "Imported calibration data for %d qubits and %d qubit pairs.", target.num_qubits, len(two_qubit_errors)
    )
    return properties


def import_backend(backend: BackendV2) -> Architecture:
    """Import a superconducting architecture from a Qiskit backend.

    Args:
        backend: The backend to import.

    Returns:
        The architecture with the coupling map and calibration data of the backend.
    """
    target = backend.target
    coupling = target.build_coupling_map()
    coupling_map: CouplingMap
    if coupling is None:
        # all instructions are global, i.e., every pair of qubits is connected
        coupling_map = get_fully_connected_map(target.num_qubits)
    else:
        coupling_map = {(control, target_qubit) for control, target_qubit in coupling.get_edges()}
    return Architecture(target.num_qubits, coupling_map, import_target(target), name=backend.name)
