"""Reference price data models and dataset parsing"""

from .models import ChipCatalog, ChipKey, ChipPrice, Module, PriceSeries, normalize_chip_key

__all__ = [
    "ChipCatalog",
    "ChipKey",
    "ChipPrice",
    "Module",
    "PriceSeries",
    "normalize_chip_key",
]
