# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from coreason_agent_tools.config import DEFAULT_DAILY_VARIABLES


class WeatherRequest(BaseModel):
    """Parameters of a forecast lookup.

    Attributes:
        latitude: Latitude of the location in degrees.
        longitude: Longitude of the location in degrees.
        forecast_days: Number of days to forecast.
        daily: Daily weather variables to include.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    forecast_days: int = Field(default=3, ge=1, le=14)
    daily: tuple[str, ...] = Field(default=DEFAULT_DAILY_VARIABLES, min_length=1)

    def query_params(self) -> dict[str, str]:
        return {
            "latitude": str(self.latitude),
            "longitude": str(self.longitude),
            "daily": ",".join(self.daily),
            "timezone": "auto",
            "forecast_days": str(self.forecast_days),
        }


class WeatherForecast(BaseModel):
    """Forecast fields passed through unmodified from the upstream response."""

    latitude: Any = None
    longitude: Any = None
    timezone: Any = None
    daily: Any
    daily_units: Any = None


class WeatherError(BaseModel):
    """A failed forecast lookup."""

    error: str
    detail: str | None = None

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
