import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drops sinks bound to a test's captured stderr once the test ends."""
    yield
    logger.remove()
