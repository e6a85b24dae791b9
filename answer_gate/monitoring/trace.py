from __future__ import annotations

import json
import logging
import os
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

_DEFAULT_TRACE_DIR = Path(__file__).resolve().parents[2] / "logs" / "trace"


def trace_enabled() -> bool:
    return os.getenv("GATE_TRACE", "0") == "1"


def _trace_dir() -> Path:
    return Path(os.getenv("GATE_TRACE_DIR", str(_DEFAULT_TRACE_DIR)))


def _to_serializable(obj: Any) -> Any:
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json", exclude_none=True)
    if isinstance(obj, dict):
        return {str(k): _to_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_serializable(v) for v in obj]
    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj
    return str(obj)


def trace_event(stage: str, kind: str, payload: Dict[str, Any] | Any, *, meta: Dict[str, Any] | None = None) -> None:
    """Append one JSONL trace record for a pipeline stage when GATE_TRACE=1.

    Callers pass flag and size summaries; answer text and judgment free text
    are not meant to reach the trace. Any model passed in is dumped whole.
    Trace I/O errors are logged and never fail the main flow.
    """
    if not trace_enabled():
        return

    now = datetime.now(timezone.utc)
    entry: Dict[str, Any] = {
        "ts": now.isoformat(timespec="milliseconds"),
        "epoch_ms": int(time.time() * 1000),
        "stage": stage,
        "kind": kind,
        "payload": _to_serializable(payload),
    }
    if meta:
        entry["meta"] = _to_serializable(meta)

    trace_dir = _trace_dir()
    try:
        trace_dir.mkdir(parents=True, exist_ok=True)
        fname = trace_dir / ("trace_" + now.strftime("%Y%m%d") + ".log")
        with fname.open("a", encoding="utf-8") as f:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")
    except OSError as exc:
        logger.warning("Failed to write trace event %s/%s: %s", stage, kind, exc)
