"""
View model binding ``BrewStatus`` fields to a rendering surface.

The state object is injected through the constructor; observers registered
with :meth:`BrewViewModel.bind` are called synchronously on every change.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from bryggio.client_app.logging import create_logger
from bryggio.domain.status import BrewStatus

Observer = Callable[[str, Any, Any], None]


class BrewViewModel:
    def __init__(self, status: Optional[BrewStatus] = None, logger: Optional[logging.Logger] = None) -> None:
        self.status = status if status is not None else BrewStatus()
        self.logger = logger or create_logger("bryggio")
        self._observers: dict[str, list[Observer]] = {name: [] for name in BrewStatus.field_names()}
        self.logger.info(f"Creating brew app: {self.status.name}", extra={"details": {"name": self.status.name}})

    @property
    def name(self) -> str:
        return self.status.name

    def bind(self, field: str, callback: Observer) -> Callable[[], None]:
        """
        Register ``callback(field, old, new)`` for changes of ``field``.

        Returns:
            A callable that removes the observer again.
        """
        if field not in self._observers:
            raise ValueError(f"Unknown field '{field}'. Available: {list(self._observers)}")
        self._observers[field].append(callback)

        def unbind() -> None:
            if callback in self._observers[field]:
                self._observers[field].remove(callback)

        return unbind

    def set(self, field: str, value: Any) -> None:
        if field not in self._observers:
            raise ValueError(f"Unknown field '{field}'. Available: {list(self._observers)}")
        value = BrewStatus.coerce(field, value)
        old = getattr(self.status, field)
        if old == value:
            return
        setattr(self.status, field, value)
        for callback in list(self._observers[field]):
            callback(field, old, value)

    def update(self, **values: Any) -> None:
        for field, value in values.items():
            self.set(field, value)

    def snapshot(self) -> dict[str, Any]:
        return self.status.to_dict()
