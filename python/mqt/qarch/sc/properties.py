# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Calibration data of a superconducting device."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types import CouplingMap, Edge


def _check_error_rate(error_rate: float) -> float:
    if not 0.0 <= error_rate <= 1.0:
        msg = f"Error rate {error_rate} is not in [0, 1]."
        raise ValueError(msg)
    return float(error_rate)


class Properties:
    """Error rates of the qubits and qubit pairs of a device.

    Entries that were never set resolve to ``default_error_rate``.
    """

    def __init__(self, num_qubits: int = 0, default_error_rate: float = 0.0) -> None:
        """Create an empty calibration record.

        Args:
            num_qubits: The number of qubits of the device.
            default_error_rate: The error rate reported for qubits, gates and qubit pairs without calibration data.
        """
        self._num_qubits = num_qubits
        self._default_error_rate = _check_error_rate(default_error_rate)
        self._single_qubit_error_rates: dict[tuple[int, str], float] = {}
        self._two_qubit_error_rates: dict[Edge, float] = {}

    @property
    def num_qubits(self) -> int:
        """The number of qubits of the device."""
        return self._num_qubits

    @property
    def default_error_rate(self) -> float:
        """The error rate reported for entries without calibration data."""
        return self._default_error_rate

    def _check_qubit(self, qubit: int) -> None:
        if not 0 <= qubit < self._num_qubits:
            msg = f"Qubit {qubit} is not in [0, {self._num_qubits})."
            raise ValueError(msg)

    def set_single_qubit_error_rate(self, qubit: int, operation: str, error_rate: float) -> None:
        """Set the error rate of a single-qubit gate on a qubit.

        Args:
            qubit: The qubit the gate acts on.
            operation: The name of the gate, e.g., ``"x"``.
            error_rate: The error rate in [0, 1].

        Raises:
            ValueError: If the qubit is out of range or the error rate is not in [0, 1].
        """
        self._check_qubit(qubit)
        self._single_qubit_error_rates[qubit, operation] = _check_error_rate(error_rate)

    def get_single_qubit_error_rate(self, qubit: int, operation: str) -> float:
        """Get the error rate of a single-qubit gate on a qubit."""
        return self._single_qubit_error_rates.get((qubit, operation), self._default_error_rate)

    def set_two_qubit_error_rate(self, control: int, target: int, error_rate: float) -> None:
        """Set the error rate of the two-qubit gate acting on an ordered qubit pair.

        Args:
            control: The first qubit of the pair.
            target: The second qubit of the pair.
            error_rate: The error rate in [0, 1].

        Raises:
            ValueError: If a qubit is out of range, both qubits are equal, or the error rate is not in [0, 1].
        """
        self._check_qubit(control)
        self._check_qubit(target)
        if control == target:
            msg = f"A two-qubit error rate needs two distinct qubits, got ({control}, {target})."
            raise ValueError(msg)
        self._two_qubit_error_rates[control, target] = _check_error_rate(error_rate)

    def get_two_qubit_error_rate(self, control: int, target: int) -> float:
        """Get the error rate of the two-qubit gate acting on an ordered qubit pair."""
        return self._two_qubit_error_rates.get((control, target), self._default_error_rate)

    def single_qubit_error_rates(self) -> dict[tuple[int, str], float]:
        """Get all explicitly set single-qubit error rates."""
        return dict(self._single_qubit_error_rates)

    def two_qubit_error_rates(self) -> dict[Edge, float]:
        """Get all explicitly set two-qubit error rates."""
        return dict(self._two_qubit_error_rates)

    def coupling_map(self) -> CouplingMap:
        """Get the qubit pairs that carry a two-qubit error rate."""
        return set(self._two_qubit_error_rates)

    def copy(self) -> Properties:
        """Get an independent copy of this calibration record."""
        return copy.deepcopy(self)

    def empty(self) -> bool:
        """Check whether no error rate has been set."""
        return not self._single_qubit_error_rates and not self._two_qubit_error_rates

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Properties):
            return NotImplemented
        return (
            self._num_qubits == other._num_qubits
            and self._default_error_rate == other._default_error_rate
            and self._single_qubit_error_rates == other._single_qubit_error_rates
            and self._two_qubit_error_rates == other._two_qubit_error_rates
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Properties(num_qubits={self._num_qubits}, "
            f"single_qubit_error_rates={len(self._single_qubit_error_rates)}, "
            f"two_qubit_error_rates={len(self._two_qubit_error_rates)})"
        )
