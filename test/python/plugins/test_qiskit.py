# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Test the Qiskit plugin of the superconducting module."""

from __future__ import annotations

import pytest
from qiskit.circuit.library import CXGate, XGate
from qiskit.providers.fake_provider import GenericBackendV2
from qiskit.transpiler import InstructionProperties, Target

from mqt.qarch.plugins.qiskit.sc import import_backend, import_target, load_architecture, load_calibration
from mqt.qarch.sc import Arch, Architecture, Properties


@pytest.fixture
def target() -> Target:
    """A three qubit target with partially recorded errors."""
    target = Target(num_qubits=3)
    target.add_instruction(
        XGate(),
        {
            (0,): InstructionProperties(error=0.01),
            (1,): InstructionProperties(error=0.02),
            (2,): None,
        },
    )
    target.add_instruction(
        CXGate(),
        {
            (0, 1): InstructionProperties(error=0.1),
            (1, 2): InstructionProperties(error=0.2),
            (2, 1): None,
        },
    )
    return target


@pytest.fixture
def backend() -> GenericBackendV2:
    """A five qubit linear backend."""
    return GenericBackendV2(num_qubits=5, coupling_map=[[0, 1], [1, 2], [2, 3], [3, 4]], seed=42)


def test_import_target(target: Target) -> None:
    """Test the import of calibration data from a target."""
    props = import_target(target)
    assert props.num_qubits == 3
    assert props.get_single_qubit_error_rate(0, "x") == 0.01
    assert props.get_single_qubit_error_rate(1, "x") == 0.02
    assert props.get_single_qubit_error_rate(2, "x") == 0.0
    assert props.get_two_qubit_error_rate(0, 1) == 0.1
    assert props.get_two_qubit_error_rate(1, 2) == 0.2
    assert props.coupling_map() == {(0, 1), (1, 2), (2, 1)}


def test_import_target_default_error_rate(target: Target) -> None:
    """Test that pairs without recorded errors get the default error rate."""
    props = import_target(target, default_error_rate=0.5)
    assert props.get_two_qubit_error_rate(2, 1) == 0.5
    assert props.get_single_qubit_error_rate(2, "x") == 0.5


def test_import_backend(backend: GenericBackendV2) -> None:
    """Test the import of an architecture from a backend."""
    arch = import_backend(backend)
    assert arch.name == backend.name
    assert arch.num_qubits == 5
    assert arch.coupling_map == {(0, 1), (1, 2), (2, 3), (3, 4)}
    assert arch.properties is not None
    assert arch.get_coupling_limit() == 4
    assert len(arch.get_all_connected_subsets(2)) == 4
    assert len(arch.get_highest_fidelity_coupling_map(3)) == 2


def test_load_architecture(backend: GenericBackendV2) -> None:
    """Test loading architectures from the supported inputs."""
    assert not load_architecture().is_loaded()
    assert load_architecture("IBMQ_London").num_qubits == 5
    assert load_architecture(Arch.IBMQ_Casablanca).num_qubits == 7
    assert load_architecture(backend).num_qubits == 5

    arch = Architecture(2, {(0, 1)})
    assert load_architecture(arch) is arch


def test_load_architecture_invalid() -> None:
    """Test that unsupported architectures are rejected."""
    with pytest.raises(ValueError, match="Unknown architecture"):
        load_architecture("ibm_qx42")
    with pytest.raises(TypeError, match="not supported"):
        load_architecture(42)  # type: ignore[arg-type]


def test_load_calibration(target: Target) -> None:
    """Test loading calibrations from the supported inputs."""
    arch = load_architecture(Arch.IBMQ_London)
    load_calibration(arch, None)
    assert arch.num_qubits == 5
    assert arch.properties is None

    load_calibration(arch, target)
    assert arch.num_qubits == 3
    assert arch.coupling_map == {(0, 1), (1, 2), (2, 1)}
    assert not arch.name
    assert arch.get_highest_fidelity_coupling_map(2) == {(0, 1)}

    props = Properties(2)
    props.set_two_qubit_error_rate(0, 1, 0.1)
    load_calibration(arch, props)
    assert arch.num_qubits == 2
    assert arch.properties == props

    with pytest.raises(TypeError, match="not supported"):
        load_calibration(arch, "calibration.csv")  # type: ignore[arg-type]
