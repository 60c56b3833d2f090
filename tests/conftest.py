"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any, List

from cryptorec_app.config.loader import ConfigLoader
from cryptorec_app.service import RecommendationService

HEADER = "timestamp,symbol,price\n"

# January 2022, deliberately not in timestamp order
BTC_RECORDS = [
    ("1641020400000", "BTC", "46979.61"),   # 01-01 07:00
    ("1641009600000", "BTC", "46813.21"),   # 01-01 04:00, oldest
    ("1641996000000", "BTC", "47722.66"),   # 12-01 14:00, max
    ("1643659200000", "BTC", "38415.79"),   # 31-01 20:00, newest
    ("1643058000000", "BTC", "33276.59"),   # 24-01 21:00, min
]

ETH_RECORDS = [
    ("1641009600000", "ETH", "3715.32"),    # 01-01 04:00
    ("1641380400000", "ETH", "3828.11"),    # 05-01 11:00
    ("1642831200000", "ETH", "2336.52"),    # 22-01 06:00
    ("1643659200000", "ETH", "2672.5"),     # 31-01 20:00
]

XRP_RECORDS = [
    ("1641009600000", "XRP", "0.8298"),     # 01-01 04:00
    ("1641031200000", "XRP", "0.8458"),     # 01-01 10:00
    ("1642248000000", "XRP", "0.7001"),     # 15-01 12:00
    ("1643500800000", "XRP", "0.6121"),     # 30-01 00:00
]

# DOGE file is corrupted by a line of another crypto, LTC has no file
DOGE_RECORDS = [
    ("1641009600000", "DOGE", "0.1702"),
    ("1641020400000", "BTC", "46979.61"),
]


def write_prices_file(folder: Path, code: str, records: List[tuple], header: str = HEADER) -> Path:
    """Write a prices CSV file for a code."""
    path = folder / f"{code}_values.csv"
    lines = [",".join(record) for record in records]
    path.write_text(header + "\n".join(lines) + ("\n" if lines else ""))
    return path


@pytest.fixture
def make_prices_file():
    """Factory writing prices files into a folder."""
    return write_prices_file


@pytest.fixture
def btc_records() -> List[List[str]]:
    """BTC records as parsed CSV rows."""
    return [list(record) for record in BTC_RECORDS]


@pytest.fixture
def prices_folder(tmp_path: Path) -> Path:
    """Prices folder with BTC, ETH, XRP and a corrupted DOGE file."""
    folder = tmp_path / "prices"
    folder.mkdir()
    write_prices_file(folder, "BTC", BTC_RECORDS)
    write_prices_file(folder, "ETH", ETH_RECORDS)
    write_prices_file(folder, "XRP", XRP_RECORDS)
    write_prices_file(folder, "DOGE", DOGE_RECORDS)
    return folder


@pytest.fixture
def fixed_now() -> datetime:
    """Wall-clock time used for history lookbacks."""
    return datetime(2022, 3, 15, tzinfo=timezone.utc)


@pytest.fixture
def service_config(tmp_path: Path, prices_folder: Path) -> Dict[str, Any]:
    """Configuration pointing at the temporary prices folder and database."""
    loader = ConfigLoader.create(tmp_path / "no-config")
    return loader.merge_config({
        "source": {"prices_folder": str(prices_folder)},
        "storage": {"db_path": str(tmp_path / "test_crypto.db")},
    })


@pytest.fixture
def service(service_config: Dict[str, Any], fixed_now: datetime) -> RecommendationService:
    """Service over the temporary prices folder with a frozen clock."""
    return RecommendationService(service_config, clock=lambda: fixed_now)
