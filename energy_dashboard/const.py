"""Constants for the energy dashboard library."""

# API endpoints, relative to "<base>/api/"
API_PATH = "/api/"
ENDPOINT_STATE = "states/{entity_id}"
ENDPOINT_HISTORY = "history/period/{start}?filter_entity_id={entity_id}&end_time={end}"

# Request timing (seconds)
API_TIMEOUT = 10
MIN_API_INTERVAL = 0.1

# Base used when no server URL is configured
DEFAULT_ORIGIN = "http://localhost:8123"

# Persisted configuration
CONFIG_STORAGE_KEY = "energyDashboardConfig"
DEFAULT_REFRESH_INTERVAL_MS = 30000

# Logical sensor roles mapped to their default entity ids
DEFAULT_SENSORS = {
    "solar_power": "sensor.enphase_current_power",
    "solar_today": "sensor.solar_production_today_kwh",
    "consumption_power": "sensor.sense_energy",
    "consumption_daily": "sensor.sense_daily_energy",
}

MAX_ENTITY_ID_LENGTH = 255
ALLOWED_URL_SCHEMES = ("http", "https")

# Shown instead of a value that cannot be displayed
PLACEHOLDER = "--"
UNIT_WATT = "W"
UNIT_KILOWATT = "kW"
