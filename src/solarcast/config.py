"""Runtime settings, read from SOLARCAST_* environment variables."""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from solarcast.energy import EFFICIENCY, INSTALLED_POWER_KW

DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

ENV_PREFIX = "SOLARCAST_"


class Settings(BaseSettings):
    """Service settings with production defaults.

    Attributes:
        forecast_url: Open-Meteo forecast endpoint.
        http_timeout: Seconds before a provider request is abandoned.
        installed_power_kw: Nominal PV installation power.
        panel_efficiency: Overall conversion efficiency (0 to 1).
        forecast_days: Days requested from the provider. The forecast
            itself always covers seven days.
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, env_ignore_empty=True, frozen=True)

    forecast_url: str = DEFAULT_FORECAST_URL
    http_timeout: float = Field(default=30.0, gt=0)
    installed_power_kw: float = Field(default=INSTALLED_POWER_KW, ge=0)
    panel_efficiency: float = Field(default=EFFICIENCY, ge=0, le=1)
    forecast_days: int = Field(default=7, ge=7, le=16)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from the environment.

        Raises:
            RuntimeError: If a variable is set but cannot be parsed
        """
        try:
            return cls()
        except ValidationError as e:
            bad = ", ".join(f"{ENV_PREFIX}{str(err['loc'][0]).upper()}" for err in e.errors())
            raise RuntimeError(f"Invalid environment variables: {bad}") from e
