"""Audit Log and Structured Logging — bounded trail and JSON formatter."""

import json
import logging

from deliberate.infrastructure.audit_log import AuditLog
from deliberate.infrastructure.observability import JSONFormatter, setup_logging


def test_audit_log_is_bounded():
    audit = AuditLog(max_entries=3)
    for i in range(5):
        audit.record(f"action_{i}", "s1")
    assert len(audit) == 3
    assert [e.action for e in audit.entries()] == ["action_2", "action_3", "action_4"]


def test_audit_entries_filter_and_limit():
    audit = AuditLog()
    audit.record("start_decision", "s1")
    audit.record("start_thinking", "s2")
    audit.record("add_option", "s1", {"name": "A"})
    assert [e.action for e in audit.entries(session_id="s1")] == ["start_decision", "add_option"]
    assert [e.action for e in audit.entries(limit=1)] == ["add_option"]
    assert audit.entries(limit=0) == []


def test_audit_record_emits_log(caplog):
    with caplog.at_level(logging.INFO, logger="deliberate.audit"):
        AuditLog().record("delete_session", "s9")
    record = caplog.records[-1]
    assert record.action == "delete_session"
    assert record.session_id == "s9"


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "deliberate.test", logging.WARNING, __file__, 1, "Tool failed", None, None,
    )
    record.tool_name = "evaluate_option"
    record.error_code = "VALIDATION_ERROR"
    payload = json.loads(JSONFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["message"] == "Tool failed"
    assert payload["tool_name"] == "evaluate_option"
    assert payload["error_code"] == "VALIDATION_ERROR"
    assert "session_id" not in payload


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    assert len(logging.root.handlers) == before + 1
    assert logging.root.level == logging.INFO
