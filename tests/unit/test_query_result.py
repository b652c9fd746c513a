"""Unit tests for QueryResult model and status/verdict enums."""

from dataclasses import fields

from resolver_check.models.query_result import QueryResult, QueryStatus, Verdict


def test_query_status_enum_values():
    """Test QueryStatus enum has correct values."""
    assert QueryStatus.ALLOWED.value == "ALLOWED"
    assert QueryStatus.BLOCKED.value == "BLOCKED"
    assert QueryStatus.ERROR.value == "ERROR"


def test_verdict_enum_values():
    assert Verdict.PASS.value == "PASS"
    assert Verdict.FAIL.value == "FAIL"
    assert Verdict.UNDETERMINED.value == "UNDETERMINED"


def test_verdict_defaults_to_none():
    result = QueryResult("example.com", QueryStatus.ALLOWED, "93.184.216.34")
    assert result.verdict is None


def test_result_carries_only_record_fields():
    assert [f.name for f in fields(QueryResult)] == ["domain", "status", "detail", "verdict"]

def test_to_json_omits_verdict_when_unset():
    result = QueryResult("example.com", QueryStatus.BLOCKED, "no answer")

    data = result.to_json()

    assert data == {"domain": "example.com", "status": "BLOCKED", "detail": "no answer"}
    assert "testResult" not in data


def test_to_json_includes_verdict_when_set():
    result = QueryResult(
        "example.com", QueryStatus.ALLOWED, "1.2.3.4", verdict=Verdict.PASS
    )

    data = result.to_json()

    assert data["testResult"] == "PASS"
    assert list(data) == ["domain", "status", "detail", "testResult"]
