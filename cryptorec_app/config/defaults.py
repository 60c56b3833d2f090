"""Default configuration parameters for the crypto recommendation engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceParams:
    """Crypto prices folder parameters."""
    prices_folder: str = "prices"                    # Folder holding <CODE><suffix> files
    file_suffix: str = "_values.csv"                 # Suffix after the code in file names
    header_lines: int = 1                            # Lines skipped at top of each file
    use_folder_codes: bool = False                   # Take codes from file names, not the registry


@dataclass(frozen=True)
class StorageParams:
    """Summary and code store parameters."""
    db_path: str = "crypto_recommendations.db"
    seed_codes: tuple = ("BTC", "DOGE", "ETH", "LTC", "XRP")


@dataclass(frozen=True)
class TimeParams:
    """Time-based parameters."""
    timezone: str = "UTC"                            # Calendar used for day filters
    day_format: str = "%d-%m-%Y"


@dataclass(frozen=True)
class HistoryParams:
    """History lookback parameters."""
    min_months: int = 1
    max_months: int = 36


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    source: SourceParams
    storage: StorageParams
    time: TimeParams
    history: HistoryParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        source=SourceParams(),
        storage=StorageParams(),
        time=TimeParams(),
        history=HistoryParams(),
        logging=LoggingParams(),
    )
