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

import anyio
import httpx

from coreason_agent_tools.config import ToolsConfig
from coreason_agent_tools.executor import CodeExecutor
from coreason_agent_tools.runtime import CodeRuntime, ProcessLauncher, ResultClassifier
from coreason_agent_tools.utils.audit import AuditLogger
from coreason_agent_tools.weather import WeatherClient


class ToolServiceAsync:
    """Async-native tool service (The Core).

    Wires configuration, the HTTP client and both tools together.
    """

    def __init__(
        self,
        config: ToolsConfig | None = None,
        client: httpx.AsyncClient | None = None,
        runtime: CodeRuntime | None = None,
    ):
        """Initializes the ToolServiceAsync service.

        Args:
            config: Configuration for the tools.
            client: Optional httpx.AsyncClient for connection pooling.
            runtime: Optional code runtime; defaults to a local ProcessLauncher.
        """
        self.config = config or ToolsConfig()
        self._internal_client = client is None
        self._client = client or httpx.AsyncClient()

        self.runtime = runtime or ProcessLauncher(
            interpreter=self.config.interpreter,
            timeout=self.config.execution_timeout,
            max_output_bytes=self.config.max_output_bytes,
        )
        self.executor = CodeExecutor(
            runtime=self.runtime,
            classifier=ResultClassifier(
                interpreter=self.config.interpreter,
                diagnostic_max_chars=self.config.diagnostic_max_chars,
            ),
            audit=AuditLogger(enabled=self.config.enable_audit_logging),
        )
        self.weather = WeatherClient(
            self._client,
            base_url=self.config.weather_base_url,
            timeout=self.config.weather_timeout,
            default_daily=self.config.weather_daily_variables,
            diagnostic_max_chars=self.config.diagnostic_max_chars,
        )

    async def __aenter__(self) -> "ToolServiceAsync":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Closes the HTTP client if this service created it."""
        if self._internal_client:
            await self._client.aclose()

    async def execute_python(self, code: str) -> dict[str, Any]:
        """Runs Python code and returns the result mapping.

        Args:
            code: The Python source to execute.

        Returns:
            dict: The execution result (success, failure or error shape).
        """
        return await self.executor.execute(code)

    async def get_weather(
        self,
        latitude: float,
        longitude: float,
        forecast_days: int = 3,
        daily: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """Fetches a daily forecast.

        Args:
            latitude: Latitude of the location.
            longitude: Longitude of the location.
            forecast_days: Number of days to forecast.
            daily: Weather variables to include.

        Returns:
            dict: The forecast, or an error mapping.
        """
        return await self.weather.get_forecast(latitude, longitude, forecast_days, daily)


class ToolService:
    """Sync Facade for ToolServiceAsync (The Facade).

    Wraps ToolServiceAsync and executes methods via anyio.run.
    Each call runs its own event loop, so no client is shared across calls.
    """

    def __init__(self, config: ToolsConfig | None = None):
        """Initializes the ToolService facade.

        Args:
            config: Configuration for the tools.
        """
        self.config = config or ToolsConfig()

    async def _run_execute(self, code: str) -> dict[str, Any]:
        async with ToolServiceAsync(self.config) as service:
            return await service.execute_python(code)

    async def _run_weather(
        self, latitude: float, longitude: float, forecast_days: int, daily: Sequence[str] | None
    ) -> dict[str, Any]:
        async with ToolServiceAsync(self.config) as service:
            return await service.get_weather(latitude, longitude, forecast_days, daily)

    def execute_python(self, code: str) -> dict[str, Any]:
        """Runs Python code synchronously.

        Args:
            code: The Python source to execute.

        Returns:
            dict: The execution result.
        """
        return anyio.run(self._run_execute, code)

    def get_weather(
        self,
        latitude: float,
        longitude: float,
        forecast_days: int = 3,
        daily: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """Fetches a daily forecast synchronously.

        Args:
            latitude: Latitude of the location.
            longitude: Longitude of the location.
            forecast_days: Number of days to forecast.
            daily: Weather variables to include.

        Returns:
            dict: The forecast, or an error mapping.
        """
        return anyio.run(self._run_weather, latitude, longitude, forecast_days, daily)
