"""Prices folder access: one CSV file per crypto code, named <CODE><suffix>."""

import csv
from pathlib import Path

from ..errors import CorruptedSource, SourceNotFound, SourceReadError
from ..logging.config import get_logger

logger = get_logger(__name__)


class FolderScanner:
    """Lists and reads crypto prices files from a folder."""

    def __init__(self, prices_folder: str | Path, file_suffix: str = "_values.csv",
                 header_lines: int = 1):
        self.prices_folder = Path(prices_folder)
        self.file_suffix = file_suffix
        self.header_lines = header_lines

    def source_name(self, code: str) -> str:
        """File name of the prices file for a code."""
        return f"{code}{self.file_suffix}"

    def list_available_codes(self) -> set[str]:
        """
        Codes of all prices files in the folder.

        Only regular files ending with the suffix and having a non-empty
        code before it are considered.

        Raises:
            SourceReadError: If the folder cannot be listed
        """
        try:
            names = [path.name for path in self.prices_folder.iterdir() if not path.is_dir()]
        except OSError as e:
            logger.error("Cannot list prices folder", folder=str(self.prices_folder), error=str(e))
            raise SourceReadError(str(self.prices_folder)) from e

        return {
            name[:-len(self.file_suffix)]
            for name in names
            if name.endswith(self.file_suffix) and len(name) > len(self.file_suffix)
        }

    def read_records(self, code: str) -> list[list[str]]:
        """
        Read every record of a code's prices file, header lines skipped.

        Raises:
            SourceNotFound: If the file does not exist
            CorruptedSource: If the CSV structure is invalid
            SourceReadError: On any other I/O failure
        """
        source = self.source_name(code)
        path = self.prices_folder / source

        try:
            with open(path, newline="", encoding="utf-8") as infile:
                reader = csv.reader(infile, strict=True)
                for _ in range(self.header_lines):
                    if next(reader, None) is None:
                        break
                records = [row for row in reader if row]
        except FileNotFoundError as e:
            raise SourceNotFound(source) from e
        except (csv.Error, UnicodeDecodeError) as e:
            logger.warning("Invalid CSV structure", source=source, error=str(e))
            raise CorruptedSource(source) from e
        except OSError as e:
            logger.error("Cannot read prices file", source=source, error=str(e))
            raise SourceReadError(source) from e

        logger.debug("Prices file read", source=source, records=len(records))
        return records
