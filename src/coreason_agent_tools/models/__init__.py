# src/coreason_agent_tools/models/__init__.py

"""
Data models for the agent tools.
"""

from .execution import (
    NO_CODE_MESSAGE,
    Completed,
    ExecutionError,
    ExecutionFailure,
    ExecutionOutcome,
    ExecutionRequest,
    ExecutionResult,
    ExecutionSuccess,
    LaunchFailed,
    TimedOut,
)
from .weather import WeatherError, WeatherForecast, WeatherRequest

__all__ = [
    "NO_CODE_MESSAGE",
    "Completed",
    "ExecutionError",
    "ExecutionFailure",
    "ExecutionOutcome",
    "ExecutionRequest",
    "ExecutionResult",
    "ExecutionSuccess",
    "LaunchFailed",
    "TimedOut",
    "WeatherError",
    "WeatherForecast",
    "WeatherRequest",
]
