"""Service-wide constants and enums."""

from enum import Enum

SERVICE_NAME = "foulwatch"

# route prefix of the condenser analytics endpoints
HEAT_EXCHANGER_PREFIX = "/heat-exchanger"

# dependency name reported by /health for the InfluxDB historian
HISTORIAN_DEPENDENCY = "influxdb"


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
