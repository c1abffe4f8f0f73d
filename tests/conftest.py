import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Generator
from unittest.mock import AsyncMock

import pytest

# Keep test runs from writing log files into the working tree
os.environ.setdefault(
    "COREASON_TOOLS_LOG_DIR", str(Path(tempfile.gettempdir()) / "coreason_agent_tools_test_logs")
)

from coreason_agent_tools.config import ToolsConfig  # noqa: E402
from coreason_agent_tools.models import Completed  # noqa: E402
from coreason_agent_tools.runtime import CodeRuntime, ProcessLauncher  # noqa: E402


@pytest.fixture
def python_config() -> ToolsConfig:
    """Config pointing at the interpreter running the tests."""
    return ToolsConfig(interpreter=sys.executable)


@pytest.fixture
def launcher() -> ProcessLauncher:
    return ProcessLauncher(interpreter=sys.executable, timeout=10.0)


@pytest.fixture
def mock_runtime() -> Generator[Any, None, None]:
    runtime = AsyncMock(spec=CodeRuntime)
    runtime.run.return_value = Completed(stdout="", stderr="", exit_code=0)
    yield runtime
