# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

from typing import Any

from pydantic import ValidationError

from coreason_agent_tools.models import NO_CODE_MESSAGE, ExecutionError, ExecutionRequest
from coreason_agent_tools.runtime import UNEXPECTED_ERROR_MESSAGE, CodeRuntime, ResultClassifier
from coreason_agent_tools.utils.audit import AuditLogger
from coreason_agent_tools.utils.logger import logger


class CodeExecutor:
    """
    The code execution tool as seen by the agent.

    Validates the request, runs it on the runtime and classifies the outcome.
    Never raises: every failure comes back as an error mapping.
    """

    def __init__(
        self,
        runtime: CodeRuntime,
        classifier: ResultClassifier | None = None,
        audit: AuditLogger | None = None,
    ):
        self.runtime = runtime
        self.classifier = classifier or ResultClassifier()
        self.audit = audit or AuditLogger()

    async def execute(self, code: Any) -> dict[str, Any]:
        """Run the code and return the result mapping.

        Args:
            code: Python source supplied by the agent.

        Returns:
            dict: `{stdout, stderr, exitCode, success}` when the program ran,
            otherwise `{error, exitCode: -1}`.
        """
        try:
            request = ExecutionRequest(code=code)
        except ValidationError:
            logger.info("Rejected execution request with no code")
            return ExecutionError(error=NO_CODE_MESSAGE).to_response()

        try:
            self.audit.log_pre_execution(request.code)
            outcome = await self.runtime.run(request.code)
            result = self.classifier.classify(outcome)
        except Exception:
            logger.exception("Unexpected error while executing code")
            return ExecutionError(error=UNEXPECTED_ERROR_MESSAGE).to_response()

        return result.to_response()
