import json

from answer_gate.models.decision import Accepted
from answer_gate.monitoring.trace import trace_event


def test_trace_disabled_writes_nothing(monkeypatch, tmp_path):
    monkeypatch.setenv("GATE_TRACE", "0")
    monkeypatch.setenv("GATE_TRACE_DIR", str(tmp_path))
    trace_event("decision", "accepted", {"a": 1})
    assert list(tmp_path.iterdir()) == []


def test_trace_enabled_appends_jsonl(monkeypatch, tmp_path):
    monkeypatch.setenv("GATE_TRACE", "1")
    monkeypatch.setenv("GATE_TRACE_DIR", str(tmp_path))

    trace_event("decision", "accepted", Accepted(completeness="low", feedback="ok"), meta={"mode": "quick"})
    trace_event("decision", "needs_review", {"reason": "malformed"})

    files = list(tmp_path.glob("trace_*.log"))
    assert len(files) == 1
    lines = [json.loads(line) for line in files[0].read_text(encoding="utf-8").splitlines()]
    assert [entry["kind"] for entry in lines] == ["accepted", "needs_review"]
    assert lines[0]["payload"]["completeness"] == "low"
    assert lines[0]["meta"] == {"mode": "quick"}
