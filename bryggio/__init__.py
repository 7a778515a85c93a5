from bryggio.client_app import ClientSettings, MeasureResult, get_settings
from bryggio.clients import BackendClient, MeasurementTrigger
from bryggio.domain import BrewStatus, BrewViewModel
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "BackendClient",
    "BrewStatus",
    "BrewViewModel",
    "ClientSettings",
    "MeasureResult",
    "MeasurementTrigger",
    "get_settings",
]

try:
    __version__ = version("bryggio")
except PackageNotFoundError:
    __version__ = "0.0.0"
