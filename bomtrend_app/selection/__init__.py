"""Module selection filters"""

from .filters import (
    ModuleFamily,
    default_selection,
    filter_family,
    memory_options,
    required_chips,
    select_modules,
    storage_options,
)

__all__ = [
    "ModuleFamily",
    "default_selection",
    "filter_family",
    "memory_options",
    "required_chips",
    "select_modules",
    "storage_options",
]
