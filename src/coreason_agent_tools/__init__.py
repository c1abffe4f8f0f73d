# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

"""
coreason-agent-tools
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .config import DEFAULT_DAILY_VARIABLES, ToolsConfig
from .executor import CodeExecutor
from .models import ExecutionError, ExecutionFailure, ExecutionRequest, ExecutionResult, ExecutionSuccess
from .runtime import CodeRuntime, ProcessLauncher, ResultClassifier
from .service import ToolService, ToolServiceAsync
from .weather import WeatherClient

__all__ = [
    "DEFAULT_DAILY_VARIABLES",
    "CodeExecutor",
    "CodeRuntime",
    "ExecutionError",
    "ExecutionFailure",
    "ExecutionRequest",
    "ExecutionResult",
    "ExecutionSuccess",
    "ProcessLauncher",
    "ResultClassifier",
    "ToolService",
    "ToolServiceAsync",
    "ToolsConfig",
    "WeatherClient",
]
