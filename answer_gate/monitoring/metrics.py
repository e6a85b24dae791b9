"""Prometheus metrics definitions and helpers for the answer gate pipeline."""

from prometheus_client import Counter, Histogram

_MODE_LABEL = ("mode",)

# Counter: answers rejected locally without a judgment call
PREFILTER_HITS_TOTAL = Counter(
    "gate_prefilter_hits_total",
    "Answers short-circuited by the local gibberish prefilter.",
    labelnames=_MODE_LABEL,
)

# Counter: judgment calls that produced no usable verdict
JUDGMENT_FAILURES_TOTAL = Counter(
    "gate_judgment_failures_total",
    "Judgment calls absorbed into needs_review, by failure kind.",
    labelnames=("mode", "kind"),
)

# Counter: final decisions per outcome
DECISIONS_TOTAL = Counter(
    "gate_decisions_total",
    "Decisions returned to callers, by outcome.",
    labelnames=("mode", "outcome"),
)

# Histogram: latency of the external judgment call
JUDGMENT_LATENCY_SECONDS = Histogram(
    "gate_judgment_latency_seconds",
    "Latency of the external judgment call (seconds).",
    labelnames=_MODE_LABEL,
    buckets=(0.2, 0.5, 1, 2, 3, 5, 10, 20),
)


def record_prefilter_hit(mode: str) -> None:
    PREFILTER_HITS_TOTAL.labels(mode=mode).inc()


def record_judgment_failure(mode: str, kind: str) -> None:
    """kind is one of "unavailable" or "malformed"."""
    JUDGMENT_FAILURES_TOTAL.labels(mode=mode, kind=kind).inc()


def record_decision(mode: str, outcome: str) -> None:
    DECISIONS_TOTAL.labels(mode=mode, outcome=outcome).inc()


def observe_judgment_latency(mode: str, seconds: float) -> None:
    JUDGMENT_LATENCY_SECONDS.labels(mode=mode).observe(max(0.0, seconds))
