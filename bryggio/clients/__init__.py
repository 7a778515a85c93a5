from bryggio.clients.backend import BackendClient, BackendConnectionError, BackendError
from bryggio.clients.measure import MeasurementTrigger

__all__ = ["BackendClient", "BackendConnectionError", "BackendError", "MeasurementTrigger"]
