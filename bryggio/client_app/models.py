from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, field_validator


class ApiResponse(BaseModel):
    success: bool = False
    result: Any | None = None
    message: Optional[str] = None

    @field_validator("success", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        # start_measure/stop_measure answer with {"success": "true"}
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return value


class MeasureResult(BaseModel):
    success: bool
    status_code: Optional[int] = None
    error: Optional[str] = None
    elapsed: float = 0.0
