"""Build and deployment metadata handed to the system use cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    # historian location as configured; may embed credentials
    influxdb_url: str = ""
    influxdb_bucket: str = ""
