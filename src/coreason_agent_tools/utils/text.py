# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

DEFAULT_DIAGNOSTIC_MAX_CHARS = 200


def cap_diagnostic(text: str, limit: int = DEFAULT_DIAGNOSTIC_MAX_CHARS) -> str:
    """Trim externally-sourced diagnostic text to at most `limit` characters."""
    return text[:limit]


def decode_and_truncate(data: bytes, dropped: int = 0) -> tuple[str, bool]:
    """
    Decode captured process output.

    `dropped` is the number of bytes already discarded past the capture cap;
    when non-zero a marker is appended so the reader knows the stream was cut.
    """
    text = data.decode("utf-8", errors="replace")
    if dropped:
        return f"{text}\n\n[Truncated: {dropped} bytes removed]", True
    return text, False
