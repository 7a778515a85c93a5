"""Tests for settings, logging ring buffer and response models."""
import logging

from bryggio.client_app import ApiResponse, BrewEventBuffer, ClientSettings, create_logger, event_buffer


def test_settings_defaults(monkeypatch):
    for var in ("BRYGGIO_URL", "BRYGGIO_MEASURE_PATH", "BRYGGIO_TIMEOUT", "BRYGGIO_LOG_RING_SIZE"):
        monkeypatch.delenv(var, raising=False)
    settings = ClientSettings(_env_file=None)
    assert settings.base_url == "http://127.0.0.1:8000"
    assert settings.measure_url == "http://127.0.0.1:8000/start_measure"
    assert settings.request_timeout == 10.0


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("BRYGGIO_URL", "http://brewpi.local:8080/")
    monkeypatch.setenv("BRYGGIO_TIMEOUT", "3.5")
    settings = ClientSettings(_env_file=None)
    assert settings.measure_url == "http://brewpi.local:8080/start_measure"
    assert settings.request_timeout == 3.5


def test_api_response_flag_coercion():
    assert ApiResponse.model_validate({"success": "true"}).success is True
    assert ApiResponse.model_validate({"success": "False"}).success is False
    assert ApiResponse.model_validate({"success": True, "result": [1, 2]}).result == [1, 2]
    assert ApiResponse.model_validate({}).success is False


def test_event_buffer_keeps_latest_entries():
    handler = BrewEventBuffer(capacity=2)
    logger = logging.getLogger("bryggio.test.capacity")
    logger.handlers = [handler]
    logger.propagate = False
    logger.setLevel(logging.INFO)
    for i in range(3):
        logger.info(f"event {i}", extra={"details": {"i": i}})
    assert [e["event"] for e in handler.events()] == ["event 1", "event 2"]
    assert handler.events()[-1]["details"] == {"i": 2}
    handler.clear()
    assert handler.events() == []


def test_event_buffer_lifts_station_and_url():
    handler = BrewEventBuffer()
    logger = logging.getLogger("bryggio.test.lifted")
    logger.handlers = [handler]
    logger.propagate = False
    logger.setLevel(logging.INFO)
    logger.info("Updating Stugan", extra={"details": {"name": "Stugan"}})
    logger.warning("start_measure failed", extra={"details": {"url": "http://brewery.test/start_measure"}})
    logger.info("no details")

    first, second, third = handler.events()
    assert first["station"] == "Stugan"
    assert first["url"] is None
    assert first["logger"] == "bryggio.test.lifted"
    assert second["url"] == "http://brewery.test/start_measure"
    assert third["station"] is None
    assert third["details"] == {}
    assert [e["event"] for e in handler.events(station="Stugan")] == ["Updating Stugan"]
    assert [e["event"] for e in handler.events(level="warning")] == ["start_measure failed"]


def test_create_logger_sized_from_settings():
    settings = ClientSettings(log_ring_size=3)
    logger = create_logger("bryggio.test.sized", settings)
    assert event_buffer(logger).capacity == 3


def test_create_logger_is_idempotent(settings):
    first = create_logger("bryggio.test.idempotent", settings)
    second = create_logger("bryggio.test.idempotent", ClientSettings(log_ring_size=5))
    assert first is second
    assert len(first.handlers) == 1
    assert event_buffer(first) is first.handlers[0]
    assert event_buffer(first).capacity == 50
    assert first.propagate is False
