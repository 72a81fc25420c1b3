"""
Error classification for dataset loading and engine configuration.

The inflation core itself degrades to sentinel values instead of raising;
these exceptions cover the boundaries around it: parsing reference datasets
and assembling configuration.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    MissingDataError,
)
from .system_failures import (
    ConfigurationError,
    DatasetLoadError,
    SystemFailureError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "DatasetLoadError",
    "ConfigurationError",
]
