"""Unit tests for registration metrics helpers"""

from prometheus_client import REGISTRY
from registration_gateway.domain.models import CreditDecision
from registration_gateway.infrastructure.observability.metrics import (
    credit_limit_bucket,
    record_registration,
)


def test_credit_limit_bucket():
    assert credit_limit_bucket(CreditDecision(has_limit=False, limit=0)) == "unlimited"
    assert credit_limit_bucket(CreditDecision(has_limit=True, limit=499)) == "<500"
    assert credit_limit_bucket(CreditDecision(has_limit=True, limit=500)) == "500-1000"
    assert credit_limit_bucket(CreditDecision(has_limit=True, limit=1000)) == "1000+"


def test_record_registration_increments_outcome():
    labels = {"outcome": "rejected", "reason": "underage"}
    before = REGISTRY.get_sample_value("registration_total", labels) or 0.0

    record_registration(False, "underage", None)

    assert REGISTRY.get_sample_value("registration_total", labels) == before + 1
