from __future__ import annotations

from collections.abc import Generator

import pytest

from config import VillageConfig
from simulation.village import Village
from utils.logger import get_logger


@pytest.fixture()
def village() -> Village:
    """A fresh village on default settings.

    Each test gets its own config object so nothing leaks through the
    module-level CONFIG.
    """
    return Village(VillageConfig())


@pytest.fixture()
def detach_log_file() -> Generator[None, None, None]:
    """Remove any file handler a test attached to the shared logger."""
    yield
    get_logger().detach_file()
