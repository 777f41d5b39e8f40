"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from wanniweather.models.common import Unit

OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENWEATHER_ICON_BASE_URL = "https://openweathermap.org/img/wn"
DEFAULT_USER_AGENT = "wanniweather/0.1.0"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPENWEATHER_BASE_URL
    icon_base_url: str = OPENWEATHER_ICON_BASE_URL
    api_key: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_unit: Unit = Unit.METRIC
    forecast_days: int = Field(default=5, ge=1, le=5)
    noon_marker: str = Field(default="12:00:00", min_length=1)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    display: DisplayConfig = DisplayConfig()
