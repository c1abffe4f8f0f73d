import hashlib
from unittest.mock import patch

from coreason_agent_tools.utils.audit import AuditLogger
from coreason_agent_tools.utils.text import cap_diagnostic, decode_and_truncate


def test_cap_diagnostic() -> None:
    assert cap_diagnostic("short") == "short"
    assert cap_diagnostic("a" * 300) == "a" * 200
    assert cap_diagnostic("abcdef", limit=3) == "abc"


def test_decode_without_drop() -> None:
    assert decode_and_truncate(b"hello") == ("hello", False)


def test_decode_with_drop_appends_marker() -> None:
    text, truncated = decode_and_truncate(b"hel", dropped=2)
    assert truncated is True
    assert text == "hel\n\n[Truncated: 2 bytes removed]"


def test_audit_returns_hash() -> None:
    code = "print('hi')"
    expected = hashlib.sha256(code.encode("utf-8")).hexdigest()

    assert AuditLogger().log_pre_execution(code) == expected


def test_audit_does_not_log_code() -> None:
    with patch("coreason_agent_tools.utils.audit.logger") as mock_logger:
        AuditLogger().log_pre_execution("secret_token = 'abc123'")

    bound = mock_logger.bind.call_args.kwargs
    assert bound["event_type"] == "CODE_EXECUTION_START"
    assert bound["code_length"] == len("secret_token = 'abc123'")
    message = mock_logger.bind.return_value.info.call_args.args[0]
    assert "abc123" not in message


def test_audit_disabled() -> None:
    with patch("coreason_agent_tools.utils.audit.logger") as mock_logger:
        AuditLogger(enabled=False).log_pre_execution("pass")

    mock_logger.bind.assert_not_called()
