"""
Application Settings - Main Layer

Pydantic Settings for every deployment-specific value: the InfluxDB
historian, the plant's physical and financial constants, alert thresholds
and gauge limits. Values come from environment variables, a .env file or
the defaults below.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from foulwatch.shared import EnumEnvironment, EnumLogLevel
from foulwatch.shared.env import load_secret_file_variables  # noqa: F401


class GESettings(BaseSettings):
    """Service identity and HTTP server settings."""

    title: str = Field(default="Foulwatch", description="Service title")
    description: str = Field(
        default="Condenser fouling monitoring: KPIs, fouling forecast "
        "and operational alerts",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("GE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("GE_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API (JSON list)",
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=3001, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class InfluxDBSettings(BaseSettings):
    """InfluxDB v2 historian holding the heat exchanger measurement."""

    url: str = Field(default="http://localhost:8086", description="InfluxDB URL")
    token: str = Field(default="", description="API token (or INFLUX_TOKEN_FILE)")
    org: str = Field(default="plant", description="InfluxDB organization")
    bucket: str = Field(default="condenser", description="Bucket with the readings")
    measurement: str = Field(
        default="heat_exchanger", description="Measurement of the condenser samples"
    )
    timeout: float = Field(default=30.0, gt=0, description="Query timeout (s)")
    history_days: int = Field(
        default=400,
        ge=1,
        description="Minimum history fetched so last year's window is available",
    )

    model_config = SettingsConfigDict(
        env_prefix="INFLUX_", case_sensitive=False, extra="ignore"
    )


class PlantSettings(BaseSettings):
    """Physical and financial constants of the condenser installation."""

    clean_u: float = Field(
        default=2500.0, description="Clean heat transfer coefficient (W/m²K)"
    )
    area: float = Field(default=44370.0, description="Heat transfer area (m²)")
    energy_rate: float = Field(default=0.12, description="Energy price per kWh")
    operating_hours: float = Field(default=24.0, description="Operating hours per day")
    coal_price: float = Field(default=5000.0, description="Coal price per ton")
    currency_symbol: str = Field(default="₹", description="Currency used in alerts")
    trend_window: int = Field(
        default=24, description="Readings used for the fouling trend regression"
    )
    seasonal_adjustment: bool = Field(
        default=True, description="Apply the year-over-year correction factor"
    )

    model_config = SettingsConfigDict(
        env_prefix="PLANT_", case_sensitive=False, extra="ignore"
    )


class ThresholdSettings(BaseSettings):
    """Alert rule cut-offs."""

    critical_fouling_resistance: float = Field(
        default=0.00026, description="Critical fouling resistance (m²K/W)"
    )
    min_efficiency_percent: float = Field(
        default=85.0, description="Thermal efficiency floor (%)"
    )
    max_daily_cost: float = Field(default=5000.0, description="Daily energy budget")
    max_co2_kg_per_day: float = Field(
        default=50.0, description="CO2 emissions ceiling (kg/day)"
    )

    model_config = SettingsConfigDict(
        env_prefix="ALERT_", case_sensitive=False, extra="ignore"
    )


class GaugeSettings(BaseSettings):
    """Limits of the live process parameter gauges."""

    max_cooling_water_in_temp: float = Field(default=35.0)
    max_cooling_water_out_temp: float = Field(default=50.0)
    min_lmtd: float = Field(default=12.0)
    max_saturation_pressure_mbar: float = Field(default=160.0)

    model_config = SettingsConfigDict(
        env_prefix="GAUGE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    ge: GESettings = Field(default_factory=GESettings)
    influxdb: InfluxDBSettings = Field(default_factory=InfluxDBSettings)
    plant: PlantSettings = Field(default_factory=PlantSettings)
    thresholds: ThresholdSettings = Field(default_factory=ThresholdSettings)
    gauges: GaugeSettings = Field(default_factory=GaugeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings per environment.
    """
    return AppSettings()


settings = get_settings()
