"""
Abstract collaborator interfaces for the registration workflow.

The evaluator depends only on these contracts, so database, HTTP and
in-memory bindings can be swapped without touching business rules.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from registration_gateway.domain.models import Client, PersistedUser


class ClientDirectory(ABC):
    """Lookup of clients by identifier"""

    @abstractmethod
    def get_by_id(self, client_id: int) -> Optional[Client]:
        """Return the client, or None when the id is unknown."""
        pass

    @abstractmethod
    def create_client(self, client_id: int, name: str) -> Client:
        """Register a client unless one with this id already exists."""
        pass


class CreditLimitService(ABC):
    """Remote credit-limit lookup for an applicant"""

    @abstractmethod
    def get_credit_limit(self, firstname: str, surname: str, date_of_birth: date) -> int:
        """Return the raw credit limit; raises CreditServiceError on failure."""
        pass


class PersistenceSink(ABC):
    """Storage for accepted applicants"""

    @abstractmethod
    def save(self, user: PersistedUser) -> None:
        """Record an accepted applicant."""
        pass

    @abstractmethod
    def list_by_client(self, client_id: int) -> List[PersistedUser]:
        """Return users registered under a client."""
        pass
