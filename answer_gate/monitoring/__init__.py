"""Prometheus wiring for the gate's HTTP surface plus the pipeline counters."""

from prometheus_fastapi_instrumentator import Instrumentator

from answer_gate.monitoring.metrics import (  # noqa: F401 - re-exported for convenience
    DECISIONS_TOTAL,
    JUDGMENT_FAILURES_TOTAL,
    JUDGMENT_LATENCY_SECONDS,
    PREFILTER_HITS_TOTAL,
)

UNTRACKED_HANDLERS = ("/health",)


def attach_instrumentator(app, *, endpoint: str = "/metrics") -> Instrumentator:
    """Count questionnaire requests and serve Prometheus text at `endpoint`.

    Health checks and the scrape endpoint are kept out of the request metrics.
    """

    instrumentator = Instrumentator(
        should_ignore_untemplated=True,
        excluded_handlers=[endpoint, *UNTRACKED_HANDLERS],
    )
    instrumentator.instrument(app).expose(app, endpoint=endpoint, include_in_schema=False, tags=["monitoring"])
    return instrumentator


__all__ = [
    "attach_instrumentator",
    "UNTRACKED_HANDLERS",
    "DECISIONS_TOTAL",
    "JUDGMENT_FAILURES_TOTAL",
    "JUDGMENT_LATENCY_SECONDS",
    "PREFILTER_HITS_TOTAL",
]
