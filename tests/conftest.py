import pytest

from kegtracker.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    yield
    reset_logging()
