"""
bestsubset: exhaustive best-subset linear regression scored by AIC.

Every combination of explanatory columns within a size range is fitted by
ordinary least squares; subset sizes are searched in parallel and the
best model per size and overall is reported.

Submodules:
    core: DataSource, exceptions, validation, timing, QR kernel
    selection: Combination enumeration, model fitting, parallel search
"""

import logging

__version__ = "0.1.0"

from bestsubset.core.datasource import DataSource
from bestsubset.selection import search

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "DataSource",
    "search",
]
