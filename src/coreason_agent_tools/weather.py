# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from coreason_agent_tools.config import DEFAULT_DAILY_VARIABLES
from coreason_agent_tools.models import WeatherError, WeatherForecast, WeatherRequest
from coreason_agent_tools.utils.logger import logger
from coreason_agent_tools.utils.text import DEFAULT_DIAGNOSTIC_MAX_CHARS, cap_diagnostic


def _has_daily(data: Any) -> bool:
    """Only an absent key or an empty scalar (null, false, 0, "") counts as missing."""
    if not isinstance(data, dict) or "daily" not in data:
        return False
    daily = data["daily"]
    return isinstance(daily, (dict, list)) or bool(daily)


class WeatherClient:
    """
    Open-Meteo forecast client. Returns plain mappings, never raises.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = "https://api.open-meteo.com/v1/forecast",
        timeout: float = 10.0,
        default_daily: tuple[str, ...] = DEFAULT_DAILY_VARIABLES,
        diagnostic_max_chars: int = DEFAULT_DIAGNOSTIC_MAX_CHARS,
    ):
        self._client = client
        self.base_url = base_url
        self.timeout = timeout
        self.default_daily = tuple(default_daily)
        self.diagnostic_max_chars = diagnostic_max_chars

    def _error(self, message: str, detail: str | None = None) -> dict[str, Any]:
        if detail:
            detail = cap_diagnostic(detail, self.diagnostic_max_chars)
        return WeatherError(error=message, detail=detail or None).to_response()

    async def get_forecast(
        self,
        latitude: float,
        longitude: float,
        forecast_days: int = 3,
        daily: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """Fetch a daily forecast for a location.

        Args:
            latitude: Latitude of the location (-90 to 90).
            longitude: Longitude of the location (-180 to 180).
            forecast_days: Number of days to forecast (1 to 14).
            daily: Weather variables to include. Omitted or empty means the configured set.

        Returns:
            dict: `{latitude, longitude, timezone, daily, daily_units}` on success,
            otherwise `{error, detail?}`.
        """
        try:
            request = WeatherRequest(
                latitude=latitude,
                longitude=longitude,
                forecast_days=forecast_days,
                daily=daily if daily else self.default_daily,
            )
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            return self._error(f"Invalid weather request: {fields or 'bad parameters'}")

        try:
            logger.info(f"Fetching {request.forecast_days}-day forecast for ({request.latitude}, {request.longitude})")
            response = await self._client.get(self.base_url, params=request.query_params(), timeout=self.timeout)

            if not response.is_success:
                logger.warning(f"Weather API returned {response.status_code}")
                return self._error(
                    f"API request failed with status {response.status_code}: {response.reason_phrase}",
                    response.text,
                )

            try:
                data = response.json()
            except ValueError:
                return self._error("Invalid response: could not parse JSON from weather API")

            if not _has_daily(data):
                return self._error("Invalid response format: missing daily forecast data")

            return WeatherForecast(
                latitude=data.get("latitude"),
                longitude=data.get("longitude"),
                timezone=data.get("timezone"),
                daily=data["daily"],
                daily_units=data.get("daily_units"),
            ).model_dump()

        except httpx.TransportError as e:
            logger.error(f"Network error reaching weather API: {e!r}")
            return self._error("Network error: could not reach weather API.")
        except Exception as e:
            logger.exception("Unexpected error while fetching weather data")
            message = cap_diagnostic(str(e), self.diagnostic_max_chars)
            return self._error(f"Failed to fetch weather data: {message}")
