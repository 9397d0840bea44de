"""Sensor state and history queries."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Any

from .client import HomeAssistantClient
from .const import ENDPOINT_HISTORY, ENDPOINT_STATE
from .exceptions import DashboardDataError, DashboardValidationError
from .models import SensorMap

_LOGGER = logging.getLogger(__name__)


def _to_datetime(value: datetime | date | str) -> datetime:
    """Return value as an aware datetime.

    Dates and date-only strings mean midnight UTC, naive datetimes are local time.
    """
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value)
        except ValueError:
            try:
                value = datetime.fromisoformat(value)
            except ValueError as err:
                raise DashboardValidationError(f"Invalid date: {value!r}") from err
    if isinstance(value, datetime):
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    raise DashboardValidationError(f"Invalid date: {value!r}")


def format_timestamp(value: datetime | date | str) -> str:
    """Normalize a point in time to UTC with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    moment = _to_datetime(value)
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"


class SensorApi:
    """Read sensor states and history through a HomeAssistantClient.

    Entity ids are passed through unchecked; validate them with
    ``is_valid_entity_id`` where they are entered.
    """

    def __init__(self, client: HomeAssistantClient) -> None:
        """Initialize the API."""
        self._client = client

    async def get_state(self, entity_id: str) -> dict[str, Any]:
        """Fetch the current state object of an entity."""
        return await self._client.request(ENDPOINT_STATE.format(entity_id=entity_id))

    async def get_history(
        self,
        entity_id: str,
        start: datetime | date | str,
        end: datetime | date | str,
    ) -> list[dict[str, Any]]:
        """Fetch the state changes of an entity between start and end.

        Args:
            entity_id: Entity to fetch.
            start: Start of the period.
            end: End of the period.

        Returns:
            The states of the entity, oldest first, or an empty list.

        Raises:
            DashboardDataError: The response is not a list of series.
        """
        endpoint = ENDPOINT_HISTORY.format(
            start=format_timestamp(start),
            entity_id=entity_id,
            end=format_timestamp(end),
        )
        data = await self._client.request(endpoint)
        if not data:
            return []
        if not isinstance(data, list) or not isinstance(data[0] or [], list):
            raise DashboardDataError(f"Unexpected history response for {entity_id}: {data!r}")
        return data[0] or []

    async def get_readings(self, sensors: SensorMap | None = None) -> dict[str, dict[str, Any]]:
        """Fetch the state of every dashboard sensor concurrently.

        Args:
            sensors: Sensors to read, the client's configured sensors by default.

        Returns:
            Mapping of role name to state object.
        """
        if sensors is None:
            sensors = self._client.config.sensors
        roles, entity_ids = zip(*sensors)
        _LOGGER.debug("Fetching readings for %s", ", ".join(entity_ids))
        readings = await asyncio.gather(*(self.get_state(entity_id) for entity_id in entity_ids))
        return dict(zip(roles, readings))
