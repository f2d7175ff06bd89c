"""
Prometheus metrics for validation runs.

Metrics live on a private registry so that embedding applications decide
whether and how to expose them.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

validations_total = Counter(
    name="fluentcheck_validations_total",
    documentation="Total number of validate() calls",
    labelnames=["validator", "outcome"],  # outcome: valid, invalid, error
    registry=REGISTRY,
)

validation_failures_total = Counter(
    name="fluentcheck_validation_failures_total",
    documentation="Total number of validation failures reported",
    labelnames=["validator", "property"],
    registry=REGISTRY,
)

validation_duration_seconds = Histogram(
    name="fluentcheck_validation_duration_seconds",
    documentation="Time spent in validate() in seconds",
    labelnames=["validator"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds, validator="CustomerValidator"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    counter.labels(**labels).inc(value)


def record_validation(validator: str, result=None, error: bool = False) -> None:
    """
    Record the outcome of one validate() call.

    Args:
        validator: Validator class name
        result: The ValidationResult (None when the call raised)
        error: True when the call aborted with a configuration error
    """
    if error or result is None:
        increment_counter(validations_total, 1, validator=validator, outcome="error")
        return

    outcome = "valid" if result.is_valid else "invalid"
    increment_counter(validations_total, 1, validator=validator, outcome=outcome)
    for failure in result.errors:
        increment_counter(validation_failures_total, 1, validator=validator, property=failure.property_name)
