"""
Dependency container injection module - Main Layer

Composition root wiring the settings into the plant configuration, the
forecast pipeline, the InfluxDB gateway and the use cases.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from foulwatch.application.models import SystemInfo
from foulwatch.application.use_cases.dashboard_use_cases import (
    GetDashboardUseCase,
    GetReadingsUseCase,
)
from foulwatch.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from foulwatch.domain.entities.plant import (
    AlertThresholds,
    GaugeLimits,
    PlantConfiguration,
)
from foulwatch.domain.services.forecast_pipeline import ForecastPipeline
from foulwatch.infrastructure.gateways.influxdb_gateway import InfluxDBReadingGateway
from foulwatch.infrastructure.services.health_check_service import HealthCheckService
from foulwatch.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Domain
    alert_thresholds = providers.Singleton(
        AlertThresholds,
        critical_fouling_resistance=config.thresholds.critical_fouling_resistance,
        min_efficiency_percent=config.thresholds.min_efficiency_percent,
        max_daily_cost=config.thresholds.max_daily_cost,
        max_co2_kg_per_day=config.thresholds.max_co2_kg_per_day,
    )

    gauge_limits = providers.Singleton(
        GaugeLimits,
        max_cooling_water_in_temp=config.gauges.max_cooling_water_in_temp,
        max_cooling_water_out_temp=config.gauges.max_cooling_water_out_temp,
        min_lmtd=config.gauges.min_lmtd,
        max_saturation_pressure_mbar=config.gauges.max_saturation_pressure_mbar,
    )

    plant_configuration = providers.Singleton(
        PlantConfiguration,
        clean_u=config.plant.clean_u,
        area=config.plant.area,
        energy_rate=config.plant.energy_rate,
        operating_hours=config.plant.operating_hours,
        coal_price=config.plant.coal_price,
        currency_symbol=config.plant.currency_symbol,
        trend_window=config.plant.trend_window,
        seasonal_adjustment=config.plant.seasonal_adjustment,
        thresholds=alert_thresholds,
        gauges=gauge_limits,
    )

    forecast_pipeline = providers.Singleton(
        ForecastPipeline,
        config=plant_configuration,
    )

    # Gateways
    reading_source = providers.Singleton(
        InfluxDBReadingGateway,
        url=config.influxdb.url,
        token=config.influxdb.token,
        org=config.influxdb.org,
        bucket=config.influxdb.bucket,
        measurement=config.influxdb.measurement,
        history_days=config.influxdb.history_days,
        timeout=config.influxdb.timeout,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        influxdb_url=config.influxdb.url,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.ge.title,
        description=config.ge.description,
        version=config.ge.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.ge.git_commit,
        build_time=config.ge.build_time,
        influxdb_url=config.influxdb.url,
        influxdb_bucket=config.influxdb.bucket,
    )

    # Application (use cases)
    get_dashboard_use_case = providers.Factory(
        GetDashboardUseCase,
        reading_source=reading_source,
        pipeline=forecast_pipeline,
    )

    get_readings_use_case = providers.Factory(
        GetReadingsUseCase,
        reading_source=reading_source,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
        plant=plant_configuration,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Validate the plant configuration before serving any request.

    Resolving the forecast pipeline runs the configuration validation, so
    an invalid deployment (e.g. a zero clean heat transfer coefficient)
    raises ConfigurationError here and aborts the application startup.
    """
    container = get_container()

    pipeline = container.forecast_pipeline()
    logger.info(
        "container.pipeline.ready",
        clean_u=pipeline.config.clean_u,
        area=pipeline.config.area,
        seasonal_adjustment=pipeline.config.seasonal_adjustment,
    )

    try:
        yield container
    finally:
        logger.info("container.resources.shutdown")
