import sys
from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from coreason_agent_tools.config import ToolsConfig
from coreason_agent_tools.runtime import ProcessLauncher
from coreason_agent_tools.service import ToolService, ToolServiceAsync


@pytest.mark.asyncio
async def test_service_wires_config() -> None:
    config = ToolsConfig(
        interpreter=sys.executable,
        execution_timeout=3.0,
        max_output_bytes=2048,
        weather_daily_variables=("weathercode",),
    )
    async with ToolServiceAsync(config) as service:
        assert isinstance(service.runtime, ProcessLauncher)
        assert service.runtime.interpreter == sys.executable
        assert service.runtime.timeout == 3.0
        assert service.runtime.max_output_bytes == 2048
        assert service.weather.default_daily == ("weathercode",)


@pytest.mark.asyncio
async def test_execute_python(python_config: ToolsConfig) -> None:
    async with ToolServiceAsync(python_config) as service:
        result = await service.execute_python("print(2+2)")

    assert result == {"stdout": "4\n", "stderr": "", "exitCode": 0, "success": True}


@pytest.mark.asyncio
async def test_custom_runtime(mock_runtime: Any) -> None:
    async with ToolServiceAsync(runtime=mock_runtime) as service:
        result = await service.execute_python("pass")

    mock_runtime.run.assert_awaited_once_with("pass")
    assert result["success"] is True


@pytest.mark.asyncio
async def test_get_weather_uses_injected_client() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"timezone": "UTC", "daily": {"time": ["2025-01-01"]}})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        service = ToolServiceAsync(client=client)
        result = await service.get_weather(51.5, -0.12)
        await service.aclose()

        # Injected clients belong to the caller
        assert not client.is_closed

    assert result["timezone"] == "UTC"
    assert result["daily"] == {"time": ["2025-01-01"]}


@pytest.mark.asyncio
async def test_internal_client_closed_on_exit() -> None:
    service = ToolServiceAsync()
    async with service:
        pass

    assert service._client.is_closed


def test_sync_execute_python(python_config: ToolsConfig) -> None:
    tools = ToolService(python_config)

    result = tools.execute_python("print('hello')")

    assert result == {"stdout": "hello\n", "stderr": "", "exitCode": 0, "success": True}


def test_sync_execute_python_empty_code(python_config: ToolsConfig) -> None:
    tools = ToolService(python_config)

    assert tools.execute_python("") == {"error": "No Python code provided to execute", "exitCode": -1}


def test_sync_get_weather() -> None:
    forecast = {"latitude": 1.0, "longitude": 2.0, "timezone": "UTC", "daily": {}, "daily_units": {}}
    with patch.object(ToolServiceAsync, "get_weather", new=AsyncMock(return_value=forecast)) as mock_get:
        result = ToolService().get_weather(1.0, 2.0, 5, ["weathercode"])

    assert result == forecast
    mock_get.assert_awaited_once_with(1.0, 2.0, 5, ["weathercode"])
