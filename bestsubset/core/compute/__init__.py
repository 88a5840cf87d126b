"""
Shared compute infrastructure for bestsubset.

This module provides the backend timer and linear algebra kernels.

IMPORTANT: This is NOT where search logic lives. That goes in
bestsubset.selection. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    linalg: Linear algebra kernels (QR least squares)
"""

from bestsubset.core.compute.timing import Timer

__all__ = [
    "Timer",
]
