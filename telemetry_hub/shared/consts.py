from enum import Enum


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


# Roughly four hours of history at one update per second.
DEFAULT_HISTORY_CAPACITY = 14400

DEFAULT_HIGH_TEMPERATURE_THRESHOLD = 26.0
DEFAULT_LOW_TEMPERATURE_THRESHOLD = 21.0

HIGH_TEMPERATURE_MESSAGE = "High temperature detected!"
LOW_TEMPERATURE_MESSAGE = "Temperature is a bit low."

INGEST_ACK_MESSAGE = "Data received successfully!"
INGEST_ERROR_MESSAGE = "Error processing data."
