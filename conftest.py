import logging

import pytest


@pytest.fixture(autouse=True)
def urinorm_setup():
    from urinorm.logger import LoggingManager

    # tests may change the console log level, restore the default
    LoggingManager.set_level(logging.INFO)
    yield
    LoggingManager.set_level(logging.INFO)
