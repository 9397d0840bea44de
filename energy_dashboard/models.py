"""Data models for the energy dashboard library."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import asdict, dataclass, field, fields
from typing import Any

from .const import DEFAULT_REFRESH_INTERVAL_MS, DEFAULT_SENSORS
from .validators import is_valid_entity_id


@dataclass
class SensorMap:
    """Entity ids for the four sensors shown on the dashboard."""

    solar_power: str = DEFAULT_SENSORS["solar_power"]
    solar_today: str = DEFAULT_SENSORS["solar_today"]
    consumption_power: str = DEFAULT_SENSORS["consumption_power"]
    consumption_daily: str = DEFAULT_SENSORS["consumption_daily"]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Iterate over (role, entity_id) pairs."""
        for role in self.roles():
            yield role, getattr(self, role)

    @staticmethod
    def roles() -> list[str]:
        """Return the role names in display order."""
        return [f.name for f in fields(SensorMap)]

    def invalid_roles(self) -> list[str]:
        """Return the roles whose entity id is not well formed."""
        return [role for role, entity_id in self if not is_valid_entity_id(entity_id)]


@dataclass
class Configuration:
    """Connection settings for a Home Assistant server.

    An empty ``server_url`` means the dashboard is served by Home Assistant
    itself and requests go to the client's origin.
    """

    server_url: str = ""
    access_token: str = ""
    refresh_interval_ms: int = DEFAULT_REFRESH_INTERVAL_MS
    sensors: SensorMap = field(default_factory=SensorMap)

    @property
    def has_token(self) -> bool:
        """Return True if an access token is set."""
        return bool(self.access_token)

    @property
    def refresh_interval(self) -> float:
        """Polling interval in seconds."""
        return self.refresh_interval_ms / 1000

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON serializable copy."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Configuration:
        """Create a configuration from a dict, ignoring unknown keys."""
        config = cls()
        for name in ("server_url", "access_token", "refresh_interval_ms"):
            if name in data:
                setattr(config, name, data[name])
        if isinstance(data.get("sensors"), dict):
            config.sensors = SensorMap(
                **{k: v for k, v in data["sensors"].items() if k in SensorMap.roles()}
            )
        return config
