# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

from abc import ABC, abstractmethod

from coreason_agent_tools.models import ExecutionOutcome


class CodeRuntime(ABC):
    """
    Abstract base class for code runtimes.
    Follows the Strategy Pattern so the executor does not care how code is run.
    """

    @abstractmethod
    async def run(self, code: str) -> ExecutionOutcome:
        """Run a program and report what happened.

        Implementations must not raise for anything the program itself does:
        non-zero exits, timeouts and launch failures are all outcomes.

        Args:
            code: The source code to execute.

        Returns:
            ExecutionOutcome: `Completed`, `TimedOut` or `LaunchFailed`.
        """
        pass  # pragma: no cover
