"""Fixtures for coded_errors tests.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterator

import pytest
from loguru import logger

from coded_errors.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_records() -> Iterator[list[str]]:
    """Collect library log messages."""
    records: list[str] = []
    logger.enable("coded_errors")
    handler_id = logger.add(records.append, level="TRACE", format="{message}")
    yield records
    logger.remove(handler_id)
    logger.disable("coded_errors")
