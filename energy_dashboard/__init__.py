"""Python library for Home Assistant energy dashboards."""

from .client import HomeAssistantClient
from .config_store import ConfigStore
from .debounce import Debouncer, debounce
from .exceptions import (
    DashboardAuthenticationError,
    DashboardConfigDecodeError,
    DashboardConnectionError,
    DashboardDataError,
    DashboardError,
    DashboardHttpStatusError,
    DashboardTimeoutError,
    DashboardValidationError,
)
from .formatters import format_energy, format_power
from .models import Configuration, SensorMap
from .sensor_api import SensorApi
from .storage import JsonFileStore, KeyValueStore, MemoryStore
from .validators import is_secure_url, is_valid_entity_id, is_valid_url, sanitize_text

__all__ = [
    "ConfigStore",
    "Configuration",
    "DashboardAuthenticationError",
    "DashboardConfigDecodeError",
    "DashboardConnectionError",
    "DashboardDataError",
    "DashboardError",
    "DashboardHttpStatusError",
    "DashboardTimeoutError",
    "DashboardValidationError",
    "Debouncer",
    "HomeAssistantClient",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "SensorApi",
    "SensorMap",
    "debounce",
    "format_energy",
    "format_power",
    "is_secure_url",
    "is_valid_entity_id",
    "is_valid_url",
    "sanitize_text",
]
