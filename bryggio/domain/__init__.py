"""
Domain models for the brewery status page: the ``BrewStatus`` state and
the ``BrewViewModel`` that binds it to a rendering layer.
"""
from bryggio.domain.status import BrewStatus
from bryggio.domain.view_model import BrewViewModel

__all__ = ["BrewStatus", "BrewViewModel"]
