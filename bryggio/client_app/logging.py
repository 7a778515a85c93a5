"""
In-memory log sink for the brew client.

Every record becomes an event dict. The station name and backend URL that
the view model and trigger pass in ``extra={"details": ...}`` are lifted to
top-level keys so callers can filter on them.
"""
import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from bryggio.client_app.config import ClientSettings, get_settings


class BrewEventBuffer(logging.Handler):
    def __init__(self, capacity: int = 200):
        super().__init__()
        self.capacity = capacity
        self._events: Deque[Dict] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        details = dict(getattr(record, "details", None) or {})
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "station": details.get("name"),
            "url": details.get("url"),
            "details": details,
        }
        with self._lock:
            self._events.append(event)

    def events(self, level: Optional[str] = None, station: Optional[str] = None) -> List[Dict]:
        with self._lock:
            recorded = list(self._events)
        if level is not None:
            recorded = [e for e in recorded if e["level"] == level.upper()]
        if station is not None:
            recorded = [e for e in recorded if e["station"] == station]
        return recorded

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, settings: Optional[ClientSettings] = None) -> logging.Logger:
    """Return ``name``'s logger with one ``BrewEventBuffer`` sized from ``settings``."""
    logger = logging.getLogger(name)
    if event_buffer(logger) is not None:
        return logger
    capacity = (settings or get_settings()).log_ring_size
    logger.setLevel(logging.INFO)
    logger.addHandler(BrewEventBuffer(capacity=capacity))
    logger.propagate = False
    return logger


def event_buffer(logger: logging.Logger) -> Optional[BrewEventBuffer]:
    for handler in logger.handlers:
        if isinstance(handler, BrewEventBuffer):
            return handler
    return None
