"""
Module selection helpers.

Selection is owned by the caller; these helpers reproduce the dashboard's
family / memory size / storage size filters and list the chip series a
selection depends on.
"""

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Optional

from ..config.defaults import SelectionParams
from ..data.models import ChipCatalog, ChipKey, Module, normalize_chip_key
from ..logging.config import get_logger, log_data_quality_issue

logger = get_logger(__name__)


class ModuleFamily(str, Enum):
    """Hardware module families."""
    SINGLE_BOARD_COMPUTER = "Single Board Computer"
    COMPUTE_MODULE = "Compute Module"


def family_marker(family: ModuleFamily, params: Optional[SelectionParams] = None) -> str:
    """Name substring identifying modules of a family."""
    params = params or SelectionParams()
    if family == ModuleFamily.SINGLE_BOARD_COMPUTER:
        return params.sbc_marker
    return params.compute_module_marker


def filter_family(modules: Iterable[Module], family: ModuleFamily,
                  params: Optional[SelectionParams] = None) -> list[Module]:
    """Modules whose name carries the family marker, in input order."""
    marker = family_marker(family, params)
    return [m for m in modules if marker in m.name]


def memory_options(modules: Iterable[Module]) -> list[float]:
    """Sorted distinct memory sizes, unknown sizes skipped."""
    return sorted({m.memory_size for m in modules if m.memory_size is not None})


def storage_options(modules: Iterable[Module]) -> list[float]:
    """Sorted distinct storage sizes (0 included), unknown sizes skipped."""
    return sorted({m.storage_size for m in modules if m.storage_size is not None})


def select_modules(
    modules: Iterable[Module],
    family: ModuleFamily,
    memory_size: Optional[float],
    storage_size: Optional[float],
    hidden: Iterable[str] = (),
    params: Optional[SelectionParams] = None,
) -> list[Module]:
    """
    Apply the family, memory and storage filters.

    Args:
        modules: Full module dataset
        family: Family to keep
        memory_size: Exact memory size (GB) to keep
        storage_size: Exact storage size (GB) to keep; None keeps modules
            with unknown storage
        hidden: Module names to leave out
        params: Family markers

    Returns:
        Matching modules in dataset order
    """
    hidden_names = set(hidden)
    return [
        m for m in filter_family(modules, family, params)
        if m.memory_size == memory_size
        and m.storage_size == storage_size
        and m.name not in hidden_names
    ]


def default_selection(
    modules: Iterable[Module],
    family: ModuleFamily,
    params: Optional[SelectionParams] = None,
) -> list[Module]:
    """
    Selection shown right after switching to a family.

    Memory size falls back to ``params.default_memory_size`` and storage to
    the smallest storage option of the family (None when the family has
    none).
    """
    params = params or SelectionParams()
    family_modules = filter_family(modules, family, params)

    storage = storage_options(family_modules)
    storage_size = storage[0] if storage else None

    return select_modules(
        family_modules, family, params.default_memory_size, storage_size, params=params
    )


def required_chips(
    selection: Sequence[Module],
    catalog: ChipCatalog,
    storage_technology: str = "EMMC",
) -> list[ChipKey]:
    """
    Distinct chip keys a selection depends on.

    Memory and storage keys are listed in first-seen order. Keys absent from
    the catalog are still listed and reported as a data quality issue.
    """
    keys: list[ChipKey] = []
    seen: set[ChipKey] = set()

    for module in selection:
        candidates = []
        if module.memory_technology and module.memory_size:
            candidates.append(normalize_chip_key(module.memory_technology, module.memory_size))
        if module.has_storage_chip:
            candidates.append(normalize_chip_key(storage_technology, module.storage_size))

        for key in candidates:
            if key is None or key in seen:
                continue
            seen.add(key)
            keys.append(key)

            if key not in catalog:
                log_data_quality_issue(
                    logger,
                    "chip_price_missing",
                    module_name=module.name,
                    context={"technology": key.technology, "size": key.size}
                )

    return keys
