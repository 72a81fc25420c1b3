"""
Structural validation for raw module and chip dataset records.

These checks run on decoded JSON before conversion into typed models. They
only reject records that cannot be represented at all; missing prices and
unknown chips are legitimate data and pass through.
"""

from typing import Any

from ..errors import MalformedDataError, MissingDataError

MODULE_REQUIRED_FIELDS = ("NAME", "USD", "DATE")
CHIP_REQUIRED_FIELDS = ("NAME", "SIZE", "USD", "DATE")


class DatasetValidator:
    """Validates raw dataset records against the prepared JSON layout."""

    def validate_module_record(self, record: Any, position: int) -> None:
        """
        Validate a raw module record.

        Args:
            record: Decoded JSON object
            position: Index of the record in the dataset, for error context

        Raises:
            MalformedDataError: If the record is not an object or series are misaligned
            MissingDataError: If a required field is absent
        """
        self._validate_record_shape(record, position, "module")
        self._validate_required_fields(record, MODULE_REQUIRED_FIELDS, position)
        self._validate_series(record, position)

    def validate_chip_record(self, record: Any, position: int) -> None:
        """Validate a raw chip price record."""
        self._validate_record_shape(record, position, "chip")
        self._validate_required_fields(record, CHIP_REQUIRED_FIELDS, position)
        self._validate_series(record, position)

    def _validate_record_shape(self, record: Any, position: int, kind: str) -> None:
        if not isinstance(record, dict):
            raise MalformedDataError(
                f"{kind.capitalize()} record #{position} must be an object",
                raw_data=str(record)[:100],
                context={"position": position}
            )

    def _validate_required_fields(self, record: dict[str, Any],
                                  required: tuple[str, ...], position: int) -> None:
        for field_name in required:
            if field_name not in record:
                raise MissingDataError(
                    f"Record #{position} missing required field {field_name}",
                    field_name=field_name,
                    record_name=str(record.get("NAME", "")) or None,
                    context={"position": position}
                )

    def _validate_series(self, record: dict[str, Any], position: int) -> None:
        name = record.get("NAME")
        usd = record["USD"]
        dates = record["DATE"]

        if not isinstance(usd, list) or not isinstance(dates, list):
            raise MalformedDataError(
                f"{name}: USD and DATE must be lists",
                expected_format="list",
                context={"position": position}
            )

        if len(usd) != len(dates):
            raise MalformedDataError(
                f"{name}: USD has {len(usd)} entries but DATE has {len(dates)}",
                expected_format="index-aligned USD and DATE",
                context={"position": position}
            )
