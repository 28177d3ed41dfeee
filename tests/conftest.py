import logging

import pytest
from loguru import logger

from trigger import Client


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    caplog.set_level(logging.DEBUG)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def client():
    return Client.create()
