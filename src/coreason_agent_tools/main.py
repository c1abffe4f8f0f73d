# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from coreason_agent_tools.runtime import UNEXPECTED_ERROR_MESSAGE
from coreason_agent_tools.service import ToolServiceAsync
from coreason_agent_tools.utils.logger import logger

# Initialize Tool Logic
service = ToolServiceAsync()

# Initialize MCP Server
mcp = FastMCP("coreason-agent-tools")


@mcp.tool()  # type: ignore[misc]
async def execute_python(
    code: Annotated[
        str,
        Field(description="Python code to execute. The code should print results to stdout. Example: print(sum([1,2,3,4,5]))"),
    ],
) -> dict[str, Any]:
    """
    Execute Python code for data analysis, calculations, or processing.
    The LLM writes Python code, and this tool runs it and returns the output.
    Use this for mathematical calculations, data analysis, or any computational tasks.
    """
    try:
        return await service.execute_python(code)
    except Exception:
        logger.exception("execute_python tool failed")
        return {"error": UNEXPECTED_ERROR_MESSAGE, "exitCode": -1}


@mcp.tool()  # type: ignore[misc]
async def get_weather(
    latitude: Annotated[float, Field(description="Latitude of the location")],
    longitude: Annotated[float, Field(description="Longitude of the location")],
    forecast_days: Annotated[int, Field(description="Number of days to forecast (1-14)")] = 3,
    daily: Annotated[
        list[str] | None,
        Field(
            description="Weather variables to include (e.g., temperature_2m_max, temperature_2m_min, "
            "precipitation_sum, windspeed_10m_max, weathercode)"
        ),
    ] = None,
) -> dict[str, Any]:
    """
    Get weather forecast data for a location.
    Use this when the user asks about weather, temperature, rain, wind, or forecasts for any location.
    """
    try:
        return await service.get_weather(latitude, longitude, forecast_days, daily)
    except Exception:
        logger.exception("get_weather tool failed")
        return {"error": "An unexpected error occurred while fetching weather data"}


def main() -> None:
    """Entry point for the MCP server."""
    logger.info("Starting coreason-agent-tools MCP server")
    mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
