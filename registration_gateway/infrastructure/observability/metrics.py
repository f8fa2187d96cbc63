"""Prometheus metrics for monitoring acceptance rates, credit limits, and credit service health"""

from typing import Optional
from prometheus_client import Counter, Histogram

from registration_gateway.domain.models import CreditDecision

# Registration metrics
registration_counter = Counter(
    "registration_total",
    "Total user registrations evaluated",
    ["outcome", "reason"],  # accepted | rejected, rejection reason or "none"
)

credit_limit_bucket_counter = Counter(
    "registration_credit_limit_bucket",
    "Credit limits resolved by bucket",
    ["bucket"],  # unlimited, <500, 500-1000, 1000+
)

# Credit service metrics
credit_service_failures_counter = Counter(
    "credit_service_failures_total",
    "Failed credit service calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def credit_limit_bucket(decision: CreditDecision) -> str:
    """Bucket label for a resolved credit decision"""
    if not decision.has_limit:
        return "unlimited"
    if decision.limit < 500:
        return "<500"
    if decision.limit < 1000:
        return "500-1000"
    return "1000+"


def record_registration(accepted: bool, reason: Optional[str], decision: Optional[CreditDecision]) -> None:
    """Record registration outcome and, when resolved, the credit limit bucket"""
    outcome = "accepted" if accepted else "rejected"
    registration_counter.labels(outcome=outcome, reason=reason or "none").inc()

    if decision is not None:
        credit_limit_bucket_counter.labels(bucket=credit_limit_bucket(decision)).inc()
