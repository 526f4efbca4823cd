# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""Super conducting module."""

from __future__ import annotations

from .arch import Arch
from .architecture import Architecture
from .coupling import get_fully_connected_map, get_qubit_list
from .fidelity import DEFAULT_REFERENCE_GATE
from .permutation import cycle_decomposition, minimum_number_of_swaps
from .properties import Properties

__all__ = [
    "DEFAULT_REFERENCE_GATE",
    "Arch",
    "Architecture",
    "Properties",
    "cycle_decomposition",
    "get_fully_connected_map",
    "get_qubit_list",
    "minimum_number_of_swaps",
]


def __dir__() -> list[str]:
    return __all__
