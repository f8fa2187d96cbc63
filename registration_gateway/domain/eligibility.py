"""Eligibility evaluation - core business logic for user registration"""

import logging
from datetime import date
from typing import Callable, Optional

from registration_gateway.domain.credit import CreditLimitResolver
from registration_gateway.domain.interfaces import ClientDirectory, PersistenceSink
from registration_gateway.domain.models import (
    Applicant,
    CreditDecision,
    EligibilityResult,
    PersistedUser,
    RejectionReason,
)
from registration_gateway.utils.date_utils import calculate_age

MINIMUM_AGE = 21
MINIMUM_CREDIT_LIMIT = 500


def is_valid_name(firstname: Optional[str], surname: Optional[str]) -> bool:
    """Both names must be present and non-empty"""
    return bool(firstname) and bool(surname)


def is_valid_email(email: Optional[str]) -> bool:
    """
    Accept an email containing at least one of "@" or ".".

    Only emails with neither marker are rejected. Requiring both would be a
    behaviour change for existing applicants.
    """
    if not email:
        return False
    return "@" in email or "." in email


def is_old_enough(date_of_birth: date, today: date) -> bool:
    return calculate_age(date_of_birth, today) >= MINIMUM_AGE


def meets_credit_threshold(decision: CreditDecision) -> bool:
    """
    Applicants with a credit limit need at least MINIMUM_CREDIT_LIMIT.
    Applicants without a limit (very important clients) always pass.
    """
    if not decision.has_limit:
        return True
    return decision.limit >= MINIMUM_CREDIT_LIMIT


class EligibilityEvaluator:
    """
    Validate an applicant, resolve their credit decision and persist them.

    Flow (each step short-circuits on failure):
    1. Name and email validation
    2. Minimum age check
    3. Client lookup (unknown clients are rejected)
    4. Credit resolution by client tier
    5. Credit threshold check
    6. Persist accepted applicant

    Rejections are returned as results and never raised. Failures of the
    credit service or the persistence sink propagate unchanged.
    """

    def __init__(
        self,
        client_directory: ClientDirectory,
        credit_resolver: CreditLimitResolver,
        persistence: PersistenceSink,
        today: Callable[[], date] = date.today,
    ):
        self.client_directory = client_directory
        self.credit_resolver = credit_resolver
        self.persistence = persistence
        self.today = today

    def evaluate(
        self,
        firstname: str,
        surname: str,
        email: str,
        date_of_birth: date,
        client_id: int,
    ) -> bool:
        """Register the applicant if eligible; True when persisted"""
        applicant = Applicant(
            firstname=firstname,
            surname=surname,
            email=email,
            date_of_birth=date_of_birth,
            client_id=client_id,
        )
        return self.assess(applicant).accepted

    def assess(self, applicant: Applicant) -> EligibilityResult:
        if not is_valid_name(applicant.firstname, applicant.surname):
            return self._reject(applicant, RejectionReason.INVALID_NAME)

        if not is_valid_email(applicant.email):
            return self._reject(applicant, RejectionReason.INVALID_EMAIL)

        if not is_old_enough(applicant.date_of_birth, self.today()):
            return self._reject(applicant, RejectionReason.UNDERAGE)

        client = self.client_directory.get_by_id(applicant.client_id)
        if client is None:
            return self._reject(applicant, RejectionReason.CLIENT_NOT_FOUND)

        decision = self.credit_resolver.resolve(
            client.tier,
            applicant.firstname,
            applicant.surname,
            applicant.date_of_birth,
        )
        if not meets_credit_threshold(decision):
            return self._reject(applicant, RejectionReason.CREDIT_LIMIT_TOO_LOW, decision)

        user = PersistedUser(
            firstname=applicant.firstname,
            surname=applicant.surname,
            email=applicant.email,
            date_of_birth=applicant.date_of_birth,
            client=client,
            has_credit_limit=decision.has_limit,
            credit_limit=decision.limit,
        )
        self.persistence.save(user)

        return EligibilityResult(accepted=True, credit_decision=decision, user=user)

    def _reject(
        self,
        applicant: Applicant,
        reason: RejectionReason,
        decision: Optional[CreditDecision] = None,
    ) -> EligibilityResult:
        logging.info(
            "Applicant rejected",
            extra={
                "step": "eligibility",
                "client_id": applicant.client_id,
                "rejection_reason": reason.value,
            },
        )
        return EligibilityResult(accepted=False, reason=reason, credit_decision=decision)
