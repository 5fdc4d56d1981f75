"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import, because settings
and the loguru sinks are configured at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402

from src.platform.logging.loguru_io import Logger  # noqa: E402


@pytest.fixture
def log_records() -> Generator[list[Any], None, None]:
    """Collect loguru records emitted during the test (synchronous sink)"""
    records: list[Any] = []
    handler_id = Logger.base.add(lambda message: records.append(message.record), level='DEBUG')
    yield records
    Logger.base.remove(handler_id)
