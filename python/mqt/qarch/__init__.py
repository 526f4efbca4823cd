# Copyright (c) 2023 - 2026 Chair for Design Automation, TUM
# Copyright (c) 2025 - 2026 Munich Quantum Software Company GmbH
# All rights reserved.
#
# SPDX-License-Identifier: MIT
#
# Licensed under the MIT License

"""MQT QArch library."""

from __future__ import annotations

from ._version import version as __version__
from .sc import Arch, Architecture, Properties

__all__ = [
    "Arch",
    "Architecture",
    "Properties",
    "__version__",
]
