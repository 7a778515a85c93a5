from bryggio.client_app.config import ClientSettings, get_settings
from bryggio.client_app.logging import BrewEventBuffer, create_logger, event_buffer
from bryggio.client_app.models import ApiResponse, MeasureResult

__all__ = [
    "ApiResponse",
    "ClientSettings",
    "MeasureResult",
    "BrewEventBuffer",
    "create_logger",
    "event_buffer",
    "get_settings",
]
