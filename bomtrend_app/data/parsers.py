"""
Dataset parsers for converting prepared JSON price files to typed models.

The module dataset and the chip dataset are produced by an external
preparation step. This module decodes them with orjson, validates their
structure and builds Module records and a ChipCatalog.
"""

from pathlib import Path
from typing import Any, Optional, Union

import orjson

from ..errors import DatasetLoadError, MalformedDataError
from ..logging.config import get_logger
from .models import ChipCatalog, ChipPrice, Module, PriceSeries, normalize_chip_key
from .validators import DatasetValidator

logger = get_logger(__name__)

_validator = DatasetValidator()


def parse_json_payload(raw_data: Union[str, bytes], dataset: str = "dataset") -> Any:
    """
    Decode a JSON document.

    Args:
        raw_data: JSON text or bytes
        dataset: Dataset label used in error context

    Returns:
        Decoded JSON value

    Raises:
        DatasetLoadError: If the payload is not valid JSON
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise DatasetLoadError(f"Invalid JSON in {dataset}: {e}", dataset=dataset) from e


def parse_price(value: Any) -> Optional[float]:
    """
    Convert a raw price cell to a float.

    Accepts numbers, null and currency strings such as "$1,234.50". Empty
    strings, "$" and "null" read as a missing price.

    Raises:
        MalformedDataError: If the value cannot be read as a price
    """
    if value is None:
        return None

    if isinstance(value, bool):
        raise MalformedDataError(f"Invalid price value: {value!r}", raw_data=str(value))

    if isinstance(value, (int, float)):
        return float(value)

    if isinstance(value, str):
        cleaned = value.replace("$", "").replace(",", "").strip()
        if not cleaned or cleaned.lower() == "null":
            return None
        try:
            return float(cleaned)
        except ValueError as e:
            raise MalformedDataError(
                f"Invalid price string: {value!r}",
                raw_data=value[:40],
                expected_format="number"
            ) from e

    raise MalformedDataError(f"Invalid price type: {type(value).__name__}", raw_data=str(value)[:40])


def parse_size(value: Any) -> Optional[float]:
    """Convert a raw capacity cell to GB, None when absent or unreadable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_price_series(record: dict[str, Any]) -> PriceSeries:
    """Build a PriceSeries from a record's DATE and USD lists."""
    return PriceSeries(
        months=tuple(str(m) for m in record["DATE"]),
        prices=tuple(parse_price(p) for p in record["USD"]),
    )


def parse_module_record(record: Any, position: int = 0) -> Module:
    """Validate and convert one raw module record."""
    _validator.validate_module_record(record, position)

    return Module(
        name=str(record["NAME"]),
        memory_size=parse_size(record.get("RAM")),
        memory_technology=str(record.get("DRAM_TYPE") or ""),
        storage_size=parse_size(record.get("EMMC")),
        prices=parse_price_series(record),
        sku=str(record.get("SKU") or ""),
        ean=str(record.get("EAN") or ""),
    )


def parse_chip_record(record: Any, position: int = 0) -> Optional[ChipPrice]:
    """
    Validate and convert one raw chip record.

    Returns:
        ChipPrice, or None if the NAME/SIZE pair cannot form a key
    """
    _validator.validate_chip_record(record, position)

    key = normalize_chip_key(record["NAME"], parse_size(record["SIZE"]))
    if key is None:
        logger.warning(
            "Chip record skipped, no usable key",
            position=position,
            name=record.get("NAME"),
            size=record.get("SIZE")
        )
        return None

    return ChipPrice(key=key, prices=parse_price_series(record), name=str(record["NAME"]))


def parse_module_dataset(payload: Any) -> list[Module]:
    """Convert a decoded module dataset, preserving record order."""
    if not isinstance(payload, list):
        raise MalformedDataError("Module dataset must be a JSON array", expected_format="array")

    return [parse_module_record(record, i) for i, record in enumerate(payload)]


def parse_chip_dataset(payload: Any) -> ChipCatalog:
    """Convert a decoded chip dataset into a catalog."""
    if not isinstance(payload, list):
        raise MalformedDataError("Chip dataset must be a JSON array", expected_format="array")

    chips = (parse_chip_record(record, i) for i, record in enumerate(payload))
    return ChipCatalog(chip for chip in chips if chip is not None)


def _read_file(path: Union[str, Path], dataset: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise DatasetLoadError(
            f"Cannot read {dataset} file: {e}",
            path=str(path),
            dataset=dataset
        ) from e


def load_module_dataset(path: Union[str, Path]) -> list[Module]:
    """Load the module price dataset from a JSON file."""
    payload = parse_json_payload(_read_file(path, "modules"), dataset="modules")
    modules = parse_module_dataset(payload)
    logger.info("Module dataset loaded", path=str(path), modules=len(modules))
    return modules


def load_chip_dataset(path: Union[str, Path]) -> ChipCatalog:
    """Load the chip price dataset from a JSON file."""
    payload = parse_json_payload(_read_file(path, "chips"), dataset="chips")
    catalog = parse_chip_dataset(payload)
    logger.info("Chip dataset loaded", path=str(path), chips=len(catalog))
    return catalog
