"""
Main recommendation service coordinator.

Wires the prices folder, the code registry, the aggregation engine and the
summary store behind the caller-facing operations:
Prices file → Records → Summary → Store ↔ History merge → Ranking
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from .aggregation import aggregate_series, merge_all_histories, merge_summaries, rank_summaries
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import AssetCode, Summary
from .data.parsers import parse_day, parse_months
from .errors import ConfigurationError, NoDataForDate, SourceError
from .logging.config import get_logger
from .persistence.base import CodeRepository, SummaryRepository
from .persistence.sqlite_store import CodeStore, SummaryStore
from .registry.codes import CodeRegistry
from .sources.folder import FolderScanner
from .utils.time import get_zone, months_before, utc_now

logger = get_logger(__name__)


class RecommendationService:
    """
    Caller-facing operations of the crypto recommendation engine.

    Every operation either returns summaries/codes or raises a
    RecommendationError whose message is meant for the caller.
    Computed summaries are persisted for later history queries.
    """

    def __init__(self,
                 config: dict[str, Any],
                 code_repository: Optional[CodeRepository] = None,
                 summary_repository: Optional[SummaryRepository] = None,
                 scanner: Optional[FolderScanner] = None,
                 clock: Callable[[], datetime] = utc_now) -> None:
        errors = ConfigValidator.validate_config(config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError("Invalid configuration", errors=error_msgs)

        self.config = config
        source_cfg = config["source"]
        storage_cfg = config["storage"]

        self.tz = get_zone(config["time"]["timezone"])
        self.day_format = config["time"]["day_format"]
        self.min_months = config["history"]["min_months"]
        self.max_months = config["history"]["max_months"]
        self.use_folder_codes = source_cfg.get("use_folder_codes", False)
        self.clock = clock

        self.scanner = scanner or FolderScanner(
            source_cfg["prices_folder"],
            file_suffix=source_cfg["file_suffix"],
            header_lines=source_cfg["header_lines"],
        )
        self.registry = CodeRegistry(
            code_repository or CodeStore(storage_cfg["db_path"], seed_codes=storage_cfg["seed_codes"])
        )
        self.summaries = summary_repository or SummaryStore(storage_cfg["db_path"])

        logger.info(
            "Recommendation service initialized",
            prices_folder=str(self.scanner.prices_folder),
            folder_codes=self.use_folder_codes,
        )

    @classmethod
    def from_config_dir(cls, config_dir: Optional[Path] = None,
                        overrides: Optional[dict[str, Any]] = None) -> "RecommendationService":
        """Build a service from settings.yaml in config_dir plus overrides."""
        loader = ConfigLoader.create(config_dir)
        return cls(loader.merge_config(overrides))

    # Current prices

    def get_by_code(self, code: str, day: Optional[str] = None) -> Optional[Summary]:
        """
        Summary of one crypto's prices file, optionally restricted to a day.

        Returns:
            Stored summary, or None if the day has no prices for this crypto

        Raises:
            UnknownCode, InvalidDateFormat, SourceError
        """
        code = self.registry.require(code)
        day_filter = parse_day(day, self.day_format) if day is not None else None
        return self._summarize(code, day_filter)

    def get_all(self, day: Optional[str] = None) -> list[Summary]:
        """
        Summaries of all supported cryptos, highest normalized range first.

        Cryptos whose prices file is missing or corrupted are skipped.

        Raises:
            InvalidDateFormat
        """
        day_filter = parse_day(day, self.day_format) if day is not None else None

        summaries = []
        for code in self._scan_codes():
            try:
                summary = self._summarize(code, day_filter)
            except SourceError as e:
                logger.warning("Skipping crypto prices file", code=code, source=e.source, reason=e.message)
                continue
            if summary is not None:
                summaries.append(summary)

        return rank_summaries(summaries)

    def get_highest_for_day(self, day: str) -> Summary:
        """
        Crypto with the highest normalized range on a day.

        Raises:
            InvalidDateFormat, NoDataForDate
        """
        ranked = self.get_all(day)
        if not ranked:
            raise NoDataForDate()
        return ranked[0]

    # Codes

    def get_codes(self) -> list[AssetCode]:
        return self.registry.all()

    def add_code(self, code: Optional[str]) -> AssetCode:
        """
        Register a new supported crypto code.

        Raises:
            DuplicateCode, CodeTooLong, InvalidCodeFormat
        """
        asset_code = self.registry.register(code)
        logger.info("Crypto code added", code=asset_code.code)
        return asset_code

    # History

    def get_history_by_code(self, code: str, months: str) -> Summary:
        """
        Merge of the stored summaries of one crypto over the last months.

        Raises:
            UnknownCode, InvalidMonthsParameter, NoHistoricalData
        """
        code = self.registry.require(code)
        nr_of_months = parse_months(months, self.min_months, self.max_months)
        since = months_before(self.clock(), nr_of_months)
        return merge_summaries(self.summaries.find_since(code, since), code=code, months=nr_of_months)

    def get_history_all(self, months: str) -> list[Summary]:
        """
        Merged history of every supported crypto, highest normalized range first.

        Raises:
            InvalidMonthsParameter, NoHistoryAcrossCodes
        """
        nr_of_months = parse_months(months, self.min_months, self.max_months)
        since = months_before(self.clock(), nr_of_months)
        codes = [asset_code.code for asset_code in self.registry.all()]
        return merge_all_histories(self.summaries.find_all_since(since), codes,
                                   months=nr_of_months, raw_months=months)

    # Output

    def format_summaries(self, summaries: Iterable[Summary]) -> str:
        """One report line per summary."""
        return "\n".join(summary.format(self.day_format) for summary in summaries)

    def _scan_codes(self) -> list[str]:
        if self.use_folder_codes:
            # File name casing is kept so the file can be opened
            folder_codes = sorted(self.scanner.list_available_codes())
            unregistered = [code for code in folder_codes if not self.registry.exists(code)]
            if unregistered:
                logger.info("Skipping prices files of unregistered codes", codes=unregistered)
            return [code for code in folder_codes if code not in unregistered]
        return [asset_code.code for asset_code in self.registry.all()]

    def _summarize(self, code: str, day_filter) -> Optional[Summary]:
        source = self.scanner.source_name(code)
        records = self.scanner.read_records(code)
        summary = aggregate_series(records, code, day=day_filter, tz=self.tz, source=source)
        if summary is None:
            return None
        return self.summaries.upsert(summary)
