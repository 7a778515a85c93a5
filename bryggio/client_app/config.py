from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class ClientSettings(BaseSettings):
    base_url: str = Field("http://127.0.0.1:8000", validation_alias="BRYGGIO_URL")
    measure_path: str = Field("/start_measure", validation_alias="BRYGGIO_MEASURE_PATH")
    request_timeout: float = Field(10.0, validation_alias="BRYGGIO_TIMEOUT")

    log_ring_size: int = Field(200, validation_alias="BRYGGIO_LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @property
    def measure_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.measure_path.lstrip('/')}"


@lru_cache
def get_settings() -> ClientSettings:
    return ClientSettings()
