"""User registration entry point wiring concrete collaborators"""

from datetime import date
from typing import Callable, Optional

from sqlalchemy.orm import Session

from registration_gateway.domain.credit import CreditLimitResolver
from registration_gateway.domain.eligibility import EligibilityEvaluator
from registration_gateway.domain.interfaces import ClientDirectory, CreditLimitService, PersistenceSink
from registration_gateway.domain.models import Applicant, EligibilityResult
from registration_gateway.infrastructure.clients.credit import CreditServiceClient
from registration_gateway.infrastructure.database.repositories import SqlClientDirectory, SqlUserRepository


class UserService:
    """
    Public registration API.

    Collaborators are injected, so the same service runs against the
    database and remote credit service in production and against
    in-memory doubles in tests.
    """

    def __init__(
        self,
        client_directory: ClientDirectory,
        credit_service: CreditLimitService,
        persistence: PersistenceSink,
        today: Callable[[], date] = date.today,
    ):
        self.evaluator = EligibilityEvaluator(
            client_directory=client_directory,
            credit_resolver=CreditLimitResolver(credit_service),
            persistence=persistence,
            today=today,
        )

    def add_user(
        self,
        firstname: str,
        surname: str,
        email: str,
        date_of_birth: date,
        client_id: int,
    ) -> bool:
        """Register a user; False when any eligibility rule rejects them"""
        return self.evaluator.evaluate(firstname, surname, email, date_of_birth, client_id)

    def register(self, applicant: Applicant) -> EligibilityResult:
        """Same as add_user, returning the full outcome"""
        return self.evaluator.assess(applicant)


def build_user_service(db: Session, credit_service: Optional[CreditLimitService] = None) -> UserService:
    """Database-backed service using the remote credit service by default"""
    return UserService(
        client_directory=SqlClientDirectory(db),
        credit_service=credit_service or CreditServiceClient(),
        persistence=SqlUserRepository(db),
    )
