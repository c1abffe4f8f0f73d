# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

from pathlib import PurePath

from coreason_agent_tools.models import (
    Completed,
    ExecutionError,
    ExecutionFailure,
    ExecutionOutcome,
    ExecutionResult,
    ExecutionSuccess,
    LaunchFailed,
    TimedOut,
)
from coreason_agent_tools.utils.text import DEFAULT_DIAGNOSTIC_MAX_CHARS, cap_diagnostic

UNEXPECTED_ERROR_MESSAGE = "Unexpected error occurred while executing Python code"


class ResultClassifier:
    """
    Maps a raw launcher outcome onto the public result taxonomy.
    """

    def __init__(self, interpreter: str = "python", diagnostic_max_chars: int = DEFAULT_DIAGNOSTIC_MAX_CHARS):
        # Only the executable name is ever shown, never the host path
        self.interpreter_name = PurePath(interpreter).name or interpreter
        self.diagnostic_max_chars = diagnostic_max_chars

    def classify(self, outcome: ExecutionOutcome) -> ExecutionResult:
        if isinstance(outcome, Completed):
            if outcome.exit_code == 0:
                return ExecutionSuccess(stdout=outcome.stdout, stderr=outcome.stderr)
            return ExecutionFailure(stdout=outcome.stdout, stderr=outcome.stderr, exit_code=outcome.exit_code)

        if isinstance(outcome, TimedOut):
            return ExecutionError(error=f"Execution timed out (exceeded {outcome.timeout:g} seconds)")

        if isinstance(outcome, LaunchFailed):
            reason = cap_diagnostic(outcome.reason, self.diagnostic_max_chars)
            return ExecutionError(error=f"Failed to execute {self.interpreter_name}: {reason}")

        return ExecutionError(error=UNEXPECTED_ERROR_MESSAGE)
