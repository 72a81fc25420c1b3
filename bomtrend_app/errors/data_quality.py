"""
Data quality error classifications for reference dataset parsing.

These exceptions categorize structural problems found in module and chip
price records while they are converted into typed models.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for data quality issues in a single dataset record."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """A required field is absent from a record."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 record_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.record_name = record_name


class MalformedDataError(DataQualityError):
    """A field exists but is in an incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
