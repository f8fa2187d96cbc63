"""Unit tests for credit limit resolution by client tier"""

import pytest
from datetime import date
from registration_gateway.domain.credit import CreditLimitResolver
from registration_gateway.domain.exceptions import CreditServiceError
from registration_gateway.domain.models import ClientTier, CreditDecision

from conftest import FakeCreditService

DOB = date(1990, 1, 1)


def test_very_important_has_no_limit_and_skips_remote_call():
    service = FakeCreditService(limit=10)
    resolver = CreditLimitResolver(service)

    decision = resolver.resolve(ClientTier.VERY_IMPORTANT, "John", "Doe", DOB)

    assert decision == CreditDecision(has_limit=False, limit=0)
    assert service.calls == []


def test_important_doubles_remote_limit():
    service = FakeCreditService(limit=300)
    resolver = CreditLimitResolver(service)

    decision = resolver.resolve(ClientTier.IMPORTANT, "John", "Doe", DOB)

    assert decision == CreditDecision(has_limit=True, limit=600)
    assert service.calls == [("John", "Doe", DOB)]


def test_default_uses_remote_limit_unchanged():
    service = FakeCreditService(limit=499)
    resolver = CreditLimitResolver(service)

    decision = resolver.resolve(ClientTier.DEFAULT, "John", "Doe", DOB)

    assert decision == CreditDecision(has_limit=True, limit=499)
    assert len(service.calls) == 1


@pytest.mark.parametrize("tier", [ClientTier.IMPORTANT, ClientTier.DEFAULT])
def test_remote_failure_propagates(tier):
    service = FakeCreditService(error=CreditServiceError("timeout"))
    resolver = CreditLimitResolver(service)

    with pytest.raises(CreditServiceError):
        resolver.resolve(tier, "John", "Doe", DOB)

    assert len(service.calls) == 1


def test_tier_from_stored_name():
    assert ClientTier.from_name("VeryImportantClient") is ClientTier.VERY_IMPORTANT
    assert ClientTier.from_name("ImportantClient") is ClientTier.IMPORTANT
    assert ClientTier.from_name("SomeOtherClient") is ClientTier.DEFAULT
    assert ClientTier.from_name(None) is ClientTier.DEFAULT
