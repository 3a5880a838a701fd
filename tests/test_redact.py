from __future__ import annotations

from pyhumistep._redact import redact_for_log


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "authorization": "secret-token",
        "content-type": "application/json",
        "nested": {"Token": "abc", "command": "電源", "secret": "s-1"},
    }

    redacted = redact_for_log(payload)
    assert redacted["authorization"] == "<redacted>"
    assert redacted["content-type"] == "application/json"
    assert redacted["nested"]["Token"] == "<redacted>"
    assert redacted["nested"]["command"] == "電源"
    assert redacted["nested"]["secret"] == "<redacted>"


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]
