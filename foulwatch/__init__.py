"""
Foulwatch Root Module

Condenser fouling monitoring: KPIs, fouling forecasts and operational
alerts derived from heat-exchanger sensor readings.

Layer Structure:
- Domain: Readings, plant configuration and the forecast pipeline
- Application: Use cases and DTOs
- Infrastructure: InfluxDB reading source and health checks
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
