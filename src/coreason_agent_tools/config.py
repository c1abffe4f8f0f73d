# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DAILY_VARIABLES: tuple[str, ...] = (
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "windspeed_10m_max",
    "weathercode",
)


class ToolsConfig(BaseSettings):
    """
    Configuration for the agent tools (code execution and weather forecast).
    """

    # Code execution
    interpreter: str = "python"
    execution_timeout: float = Field(default=10.0, gt=0)
    max_output_bytes: int = Field(default=1024 * 1024, gt=0)  # 1 MiB per stream
    enable_audit_logging: bool = True

    # Cap for any externally-sourced diagnostic text (OS errors, upstream bodies)
    diagnostic_max_chars: int = Field(default=200, gt=0)

    # Open-Meteo
    weather_base_url: str = "https://api.open-meteo.com/v1/forecast"
    weather_timeout: float = Field(default=10.0, gt=0)
    weather_daily_variables: tuple[str, ...] = DEFAULT_DAILY_VARIABLES

    model_config = SettingsConfigDict(
        env_prefix="COREASON_TOOLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )
