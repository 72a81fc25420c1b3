"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures that stop the engine from being built
at all and require fixing the input files or configuration.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class DatasetLoadError(SystemFailureError):
    """A dataset file could not be read or decoded."""

    def __init__(self, message: str, path: Optional[str] = None,
                 dataset: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        self.dataset = dataset


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source
