"""Shared pytest fixtures."""
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by setup_logging(); they hold the captured stdout of the test that ran it."""
    yield
    logger = logging.getLogger("spaceobjects")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
