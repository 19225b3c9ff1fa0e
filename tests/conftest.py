import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger.remove()
    logger.disable("seatchart")
