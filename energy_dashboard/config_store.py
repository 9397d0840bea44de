"""Load and persist the dashboard configuration."""

from __future__ import annotations

import json
import logging
from typing import Any

from .const import CONFIG_STORAGE_KEY
from .exceptions import DashboardConfigDecodeError
from .models import Configuration, SensorMap
from .storage import KeyValueStore
from .validators import is_valid_url

_LOGGER = logging.getLogger(__name__)


class ConfigStore:
    """Owns the live configuration and its persisted copy."""

    def __init__(
        self,
        storage: KeyValueStore,
        config: Configuration | None = None,
        key: str = CONFIG_STORAGE_KEY,
    ) -> None:
        """Initialize the store.

        Args:
            storage: Key-value store holding the persisted record.
            config: Live configuration, defaults are used if not provided.
            key: Key of the persisted record.
        """
        self._storage = storage
        self._key = key
        self.config = config if config is not None else Configuration()

    def load(self) -> bool:
        """Merge the persisted configuration onto the live one.

        Returns False when there is nothing usable stored; a corrupt record is
        removed so the next start is clean.
        """
        raw = self._storage.get_item(self._key)
        if not raw:
            return False
        try:
            saved = self._decode(raw)
        except DashboardConfigDecodeError as err:
            _LOGGER.error("Failed to parse saved config: %s", err)
            self._storage.remove_item(self._key)
            return False

        self._merge(self._sanitize(saved))
        _LOGGER.debug("Loaded config for %s", self.config.server_url or "same origin")
        return True

    def save(self) -> None:
        """Persist the full live configuration.

        Storage errors are raised to the caller.
        """
        self._storage.set_item(self._key, json.dumps(self.config.as_dict()))

    def clear(self) -> None:
        """Remove the persisted record and reset the live configuration to defaults."""
        self._storage.remove_item(self._key)
        defaults = Configuration()
        self.config.server_url = defaults.server_url
        self.config.access_token = defaults.access_token
        self.config.refresh_interval_ms = defaults.refresh_interval_ms
        self.config.sensors = defaults.sensors

    @staticmethod
    def _decode(raw: str) -> dict[str, Any]:
        try:
            saved = json.loads(raw)
        except ValueError as err:
            raise DashboardConfigDecodeError(f"Invalid JSON: {err}") from err
        if not isinstance(saved, dict):
            raise DashboardConfigDecodeError(f"Expected an object, got {type(saved).__name__}")
        return saved

    @staticmethod
    def _sanitize(saved: dict[str, Any]) -> dict[str, Any]:
        """Drop stored fields that would break the configuration invariants."""
        saved = dict(saved)
        if "server_url" in saved and (
            not isinstance(saved["server_url"], str) or not is_valid_url(saved["server_url"])
        ):
            _LOGGER.warning("Invalid URL in saved config, ignoring")
            del saved["server_url"]
        if "access_token" in saved and not isinstance(saved["access_token"], str):
            _LOGGER.warning("Invalid access token in saved config, ignoring")
            del saved["access_token"]
        if "refresh_interval_ms" in saved:
            interval = saved["refresh_interval_ms"]
            if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
                _LOGGER.warning("Invalid refresh interval %r in saved config, ignoring", interval)
                del saved["refresh_interval_ms"]
        if "sensors" in saved:
            sensors = saved["sensors"]
            if not isinstance(sensors, dict):
                _LOGGER.warning("Invalid sensor map in saved config, ignoring")
                del saved["sensors"]
            else:
                saved["sensors"] = {}
                for role, entity_id in sensors.items():
                    if role in SensorMap.roles() and isinstance(entity_id, str):
                        saved["sensors"][role] = entity_id
                    else:
                        _LOGGER.warning("Invalid sensor %r in saved config, ignoring", role)
        return saved

    def _merge(self, saved: dict[str, Any]) -> None:
        loaded = Configuration.from_dict(saved)
        for name in ("server_url", "access_token", "refresh_interval_ms"):
            if name in saved:
                setattr(self.config, name, getattr(loaded, name))
        if "sensors" in saved:
            self.config.sensors = loaded.sensors
