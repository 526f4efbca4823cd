# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Qiskit utilities for superconducting module."""

from __future__ import annotations

from .import_backend import import_backend, import_target
from .load_architecture import load_architecture
from .load_calibration import load_calibration

__all__ = [
    "import_backend",
    "import_target",
    "load_architecture",
    "load_calibration",
]


def __dir__() -> list[str]:
    return __all__
