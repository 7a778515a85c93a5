import uuid

import pytest

from bryggio.client_app import ClientSettings, create_logger, event_buffer


@pytest.fixture
def settings():
    return ClientSettings(base_url="http://brewery.test", request_timeout=2.0, log_ring_size=50)


@pytest.fixture
def logger(settings):
    return create_logger(f"bryggio.test.{uuid.uuid4().hex}", settings)


@pytest.fixture
def events(logger):
    """Callable returning the events recorded by the ``logger`` fixture."""
    return event_buffer(logger).events
