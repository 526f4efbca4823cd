# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Load a superconducting architecture."""

from __future__ import annotations

from qiskit.providers import Backend

from ....sc import Arch, Architecture


def load_architecture(arch: str | Arch | Architecture | Backend | None = None) -> Architecture:
    """Load a superconducting architecture from a string, Arch, Architecture, or Backend.

    If None is passed, no architecture is loaded.

    Args:
        arch: The architecture to load.

    Returns:
        The loaded architecture.

    Raises:
        ValueError: If a string does not name a built-in architecture.
        TypeError: If the type of the architecture is not supported.
    """
    architecture = Architecture()

    if arch is not None:
        if isinstance(arch, (str, Arch)):
            architecture.load_coupling_map(arch)
        elif isinstance(arch, Architecture):
            architecture = arch
        elif isinstance(arch, Backend):
            from .import_backend import import_backend  # noqa: PLC0415 to decouple from Qiskit

            architecture = import_backend(arch)
        else:
            msg = f"Architecture type {type(arch)} not supported."
            raise TypeError(msg)

    return architecture
