"""Pydantic v2 configuration schema with strict validation."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from weatherpage.models.common import DEFAULT_REGION, Region


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://opendata.cwa.gov.tw"
    dataset_id: str = "F-C0032-001"
    api_key_env: str = "CWA_API_KEY"
    timeout_seconds: float = Field(default=10.0, gt=0.0, le=120.0)
    user_agent: str = "weatherpage/0.1.0"


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True
    ttl_seconds: int = Field(default=300, ge=0)
    max_entries: int = Field(default=64, ge=1)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_region: Region = DEFAULT_REGION
    timezone: str = "Asia/Taipei"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {value}") from e
        return value


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class PageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    cache: CacheConfig = CacheConfig()
    display: DisplayConfig = DisplayConfig()
    server: ServerConfig = ServerConfig()
