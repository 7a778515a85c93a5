"""
The state shown on a brewery status page.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

DEFAULT_NAME = "BRYGGANS BRYGGERI BÄRS BB"


def validate_counter(value: Any) -> int:
    """Counter must be a non-negative ``int`` (``bool`` is rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"counter must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"counter must be non-negative, got {value}")
    return value


@dataclass
class BrewStatus:
    """
    Bindable fields of a brewing station.

    Every assignment goes through :meth:`coerce`, so the constraints hold
    for direct attribute writes as well as for the view model.

    Attributes:
        name: Identifier of the brewing station.
        message: Free-text status line.
        counter: Non-negative counter, starts at 0.
        recipe: Name of the active recipe.
        temperature: Latest reading in degrees Celsius.
    """
    name: str = DEFAULT_NAME
    message: str = "Närstrid och torrhumling"
    counter: int = 0
    recipe: str = "Lager"
    temperature: float = 20.2

    @staticmethod
    def coerce(field: str, value: Any) -> Any:
        if field == "counter":
            return validate_counter(value)
        if field == "temperature":
            try:
                return float(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"temperature must be a number, got {value!r}") from exc
        return value

    def __setattr__(self, key: str, value: Any) -> None:
        super().__setattr__(key, self.coerce(key, value))

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
