import logging

import pytest


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_wren_logger():
    """Drop handlers that ``configure_logging`` attached during a test."""
    logger = logging.getLogger("wren")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
