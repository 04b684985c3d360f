from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class ServerSettings(BaseSettings):
    server_ip: str = Field("127.0.0.1", validation_alias="SERVER_IP")
    server_port: int = Field(10290, validation_alias="SERVER_PORT")

    log_ring_size: int = Field(200, validation_alias="LOG_RING_SIZE")
    history_size: int = Field(50, validation_alias="HISTORY_SIZE")
    # Least recently updated devices are dropped past this many.
    max_devices: int = Field(1000, validation_alias="MAX_DEVICES")
    max_payload_length: int = Field(4096, validation_alias="MAX_PAYLOAD_LENGTH")

    # When set, every request must carry a matching X-Api-Token header.
    api_token: Optional[str] = Field(None, validation_alias="API_TOKEN")
    default_source: str = Field("local", validation_alias="DEFAULT_SOURCE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> ServerSettings:
    return ServerSettings()
