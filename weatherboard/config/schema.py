"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field


class CityConfig(BaseModel):
    model_config = {"extra": "forbid"}

    slug: str = Field(pattern=r"^[a-z][a-z0-9-]*$")
    name: str
    enabled: bool = True


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "http://localhost:8081"
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    retry_attempts: int = Field(default=3, ge=0)
    retry_delay_ms: int = Field(default=1000, ge=0)


class RefreshConfig(BaseModel):
    model_config = {"extra": "forbid"}

    data_interval_minutes: float = Field(default=15, gt=0)
    status_interval_seconds: float = Field(default=1, gt=0)


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class BoardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    refresh: RefreshConfig = RefreshConfig()
    dashboard: DashboardConfig = DashboardConfig()
    cities: list[CityConfig] = []

    def enabled_slugs(self) -> list[str]:
        return [c.slug for c in self.cities if c.enabled]
