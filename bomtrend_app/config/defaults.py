"""Default configuration parameters for the inflation breakdown engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WindowParams:
    """Year-over-year comparison window parameters."""
    offset_months: int = 11                          # Jan -> Dec of the same year


@dataclass(frozen=True)
class ProjectionParams:
    """Forward projection parameters."""
    horizon_months: int = 12                         # Projected points after "now"
    adjustment_step_pct: float = 0.5                 # Manual +/- step for rate deltas


@dataclass(frozen=True)
class ChipParams:
    """Chip reference lookup parameters."""
    storage_technology: str = "EMMC"                 # Chip dataset NAME for storage


@dataclass(frozen=True)
class SelectionParams:
    """Module family filter parameters."""
    sbc_marker: str = "Pi "                          # Single board computer names
    compute_module_marker: str = "CM"                # Compute module names
    default_memory_size: float = 8.0                 # GB


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    window: WindowParams
    projection: ProjectionParams
    chips: ChipParams
    selection: SelectionParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        window=WindowParams(),
        projection=ProjectionParams(),
        chips=ChipParams(),
        selection=SelectionParams(),
        logging=LoggingParams(),
    )
