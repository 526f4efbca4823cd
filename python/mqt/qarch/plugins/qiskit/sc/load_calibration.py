# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Load a calibration for a superconducting architecture."""

from __future__ import annotations

from typing import TYPE_CHECKING

from qiskit.transpiler.target import Target

from ....sc import Properties

if TYPE_CHECKING:
    from ....sc import Architecture


def load_calibration(architecture: Architecture, calibration: Properties | Target | None = None) -> None:
    """Load a superconducting calibration from Properties or a Target.

    Loading a calibration replaces the complete state of the architecture, including its name. Its coupling
    map consists of the qubit pairs the calibration provides two-qubit data for.

    Args:
        architecture: The architecture to load the calibration into.
        calibration: The calibration to load.

    Raises:
        TypeError: If the type of the calibration is not supported.
    """
    if calibration is None:
        return

    if isinstance(calibration, Properties):
        architecture.load_properties(calibration)
    elif isinstance(calibration, Target):
        from .import_backend import import_target  # noqa: PLC0415 to decouple from Qiskit

        architecture.load_properties(import_target(calibration))
    else:
        msg = f"Calibration type {type(calibration)} not supported."
        raise TypeError(msg)
