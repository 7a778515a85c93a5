from __future__ import annotations

from typing import Any, Optional

import requests
from pydantic import ValidationError

from bryggio.client_app.config import ClientSettings, get_settings
from bryggio.client_app.models import ApiResponse


class BackendError(ValueError):
    """Raised when the backend answers with an error or an unusable payload."""
    pass


class BackendConnectionError(ConnectionError):
    """Raised when the backend cannot be reached."""
    pass


class BackendClient:
    """Blocking client for the BryggIO backend's JSON routes."""

    def __init__(self, settings: Optional[ClientSettings] = None) -> None:
        self.settings = settings or get_settings()
        self.base_url = self.settings.base_url.rstrip("/")

    # ---- helpers ----
    def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> ApiResponse:
        try:
            resp = requests.get(
                url=f"{self.base_url}{path}",
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as exc:
            raise BackendConnectionError(
                f"Could not reach backend at {self.base_url}. Original error: {exc}"
            ) from exc
        if resp.status_code not in (200, 201):
            raise BackendError(f"Backend GET {path} failed: {resp.status_code} {resp.text}")
        try:
            return ApiResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise BackendError(f"Failed to parse response from {path}: {resp.text}") from exc

    def _result(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        response = self._get(path, params)
        if not response.success:
            raise BackendError(response.message or f"Backend call {path} was not successful")
        return response.result

    # ---- measurement ----
    def start_measure(self) -> ApiResponse:
        return self._get(self.settings.measure_path)

    def stop_measure(self) -> ApiResponse:
        return self._get("/stop_measure")

    def get_measurement(self, sensor_id: str) -> float:
        return float(self._result("/get_measurement", {"sensor_id": sensor_id}))

    def add_sensor(self, sensor_id: str, sensor_type: str) -> Any:
        return self._result("/add_sensor", {"sensor_id": sensor_id, "sensor_type": sensor_type})

    def list_available_sensors(self) -> list[Any]:
        return list(self._result("/list_available_sensors") or [])

    # ---- control ----
    def start_controller(self, controller_id: str, sensor_id: str, actor_id: str) -> Any:
        return self._result(
            "/start_controller",
            {"controller_id": controller_id, "sensor_id": sensor_id, "actor_id": actor_id},
        )

    def stop_controller(self, controller_id: str) -> Any:
        return self._result("/stop_controller", {"controller_id": controller_id})

    def get_control_signal(self, controller_id: str) -> float:
        return float(self._result("/get_control_signal", {"controller_id": controller_id}))

    def get_target_signal(self, controller_id: str) -> float:
        return float(self._result("/get_target_signal", {"controller_id": controller_id}))

    def set_target_signal(self, controller_id: str, new_target_signal: float) -> Any:
        return self._result(
            "/set_target_signal",
            {"controller_id": controller_id, "new_target_signal": new_target_signal},
        )

    # ---- brewery ----
    def get_full_state(self) -> Any:
        return self._result("/get_full_state")

    def get_brewery_name(self) -> str:
        return str(self._result("/get_brewery_name"))

    def get_bryggio_version(self) -> str:
        return str(self._result("/get_bryggio_version"))

    def refresh_status(self, view_model, sensor_id: str) -> None:
        """Write the backend's brewery name and a fresh reading into ``view_model``."""
        view_model.update(
            name=self.get_brewery_name(),
            temperature=self.get_measurement(sensor_id),
        )
