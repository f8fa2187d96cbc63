"""Credit limit resolution - maps a client tier to a credit decision"""

from datetime import date
from typing import Callable, Dict

from registration_gateway.domain.interfaces import CreditLimitService
from registration_gateway.domain.models import ClientTier, CreditDecision

# Important clients get double the limit the credit service reports
IMPORTANT_CLIENT_MULTIPLIER = 2


class CreditLimitResolver:
    """
    Resolve the credit decision for an applicant based on client tier.

    Tier policy:
    - VERY_IMPORTANT: no credit limit, credit service is not called
    - IMPORTANT: remote limit doubled
    - DEFAULT: remote limit as reported

    Each call makes at most one request to the credit service. Errors from
    the service (CreditServiceError) propagate to the caller.
    """

    def __init__(self, credit_service: CreditLimitService):
        self.credit_service = credit_service
        self._strategies: Dict[ClientTier, Callable[[str, str, date], CreditDecision]] = {
            ClientTier.VERY_IMPORTANT: self._very_important,
            ClientTier.IMPORTANT: self._important,
            ClientTier.DEFAULT: self._default,
        }

    def resolve(
        self,
        tier: ClientTier,
        firstname: str,
        surname: str,
        date_of_birth: date,
    ) -> CreditDecision:
        strategy = self._strategies[tier]
        return strategy(firstname, surname, date_of_birth)

    def _fetch_limit(self, firstname: str, surname: str, date_of_birth: date) -> int:
        return self.credit_service.get_credit_limit(firstname, surname, date_of_birth)

    def _very_important(self, firstname: str, surname: str, date_of_birth: date) -> CreditDecision:
        return CreditDecision(has_limit=False, limit=0)

    def _important(self, firstname: str, surname: str, date_of_birth: date) -> CreditDecision:
        limit = self._fetch_limit(firstname, surname, date_of_birth)
        return CreditDecision(has_limit=True, limit=limit * IMPORTANT_CLIENT_MULTIPLIER)

    def _default(self, firstname: str, surname: str, date_of_birth: date) -> CreditDecision:
        limit = self._fetch_limit(firstname, surname, date_of_birth)
        return CreditDecision(has_limit=True, limit=limit)
