# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

"""Data models for code execution requests, raw outcomes and public results."""

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_CODE_MESSAGE = "No Python code provided to execute"


class ExecutionRequest(BaseModel):
    """A single request to run a program. The code is stored trimmed."""

    model_config = ConfigDict(frozen=True)

    code: str

    @field_validator("code", mode="before")
    @classmethod
    def _strip_and_require(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(NO_CODE_MESSAGE)
        return value.strip()


# Raw outcomes produced by the process launcher. Internal only.


@dataclass(frozen=True)
class Completed:
    """The process ran to completion (with any exit status)."""

    stdout: str
    stderr: str
    exit_code: int
    truncated: bool = False


@dataclass(frozen=True)
class TimedOut:
    """The process exceeded its deadline and was killed."""

    timeout: float


@dataclass(frozen=True)
class LaunchFailed:
    """The process could not be started."""

    reason: str


ExecutionOutcome = Completed | TimedOut | LaunchFailed


# Public results returned to the calling agent.


class _ResultBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_response(self) -> dict[str, Any]:
        """Serialize to the plain mapping handed back to the agent."""
        return self.model_dump(by_alias=True)


class ExecutionSuccess(_ResultBase):
    """The program exited with status 0."""

    stdout: str
    stderr: str
    exit_code: Literal[0] = Field(default=0, alias="exitCode")
    success: Literal[True] = True


class ExecutionFailure(_ResultBase):
    """The program ran but exited with a non-zero status."""

    stdout: str
    stderr: str
    exit_code: int = Field(..., alias="exitCode")
    success: Literal[False] = False

    @field_validator("exit_code")
    @classmethod
    def _non_zero(cls, value: int) -> int:
        if value == 0:
            raise ValueError("A failure result requires a non-zero exit code")
        return value


class ExecutionError(_ResultBase):
    """The program could not produce a result: bad input, timeout, launch or internal error."""

    error: str
    exit_code: Literal[-1] = Field(default=-1, alias="exitCode")


ExecutionResult = ExecutionSuccess | ExecutionFailure | ExecutionError
