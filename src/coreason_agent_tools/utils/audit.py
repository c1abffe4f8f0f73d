# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

import hashlib

from coreason_agent_tools.utils.logger import logger


class AuditLogger:
    """
    Records code execution attempts without persisting the code itself.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def log_pre_execution(self, code: str, language: str = "python") -> str:
        """
        Log the code execution attempt. Returns a hash of the code.
        """
        code_hash = hashlib.sha256(code.encode("utf-8")).hexdigest()

        if self.enabled:
            logger.bind(
                event_type="CODE_EXECUTION_START",
                language=language,
                code_hash=code_hash,
                code_length=len(code),
            ).info(f"Executing {language} code ({len(code)} chars, sha256={code_hash[:12]})")

        return code_hash
