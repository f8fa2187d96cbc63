"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class ClientTier(str, Enum):
    """Client classification governing credit-limit policy"""

    DEFAULT = "Default"
    IMPORTANT = "ImportantClient"
    VERY_IMPORTANT = "VeryImportantClient"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "ClientTier":
        """Map a stored client type name to its tier; unknown names are DEFAULT"""
        for tier in cls:
            if tier.value == name:
                return tier
        return cls.DEFAULT


class ClientStatus(str, Enum):
    NONE = "none"
    ACTIVE = "active"
    SUSPENDED = "suspended"


class RejectionReason(str, Enum):
    """Why an applicant was not registered"""

    INVALID_NAME = "invalid_name"
    INVALID_EMAIL = "invalid_email"
    UNDERAGE = "underage"
    CLIENT_NOT_FOUND = "client_not_found"
    CREDIT_LIMIT_TOO_LOW = "credit_limit_too_low"


@dataclass
class Client:
    """Client an applicant registers under"""

    id: int
    name: str
    tier: ClientTier = ClientTier.DEFAULT
    status: ClientStatus = ClientStatus.NONE


@dataclass
class Applicant:
    """Registration request, discarded after evaluation"""

    firstname: str
    surname: str
    email: str
    date_of_birth: date
    client_id: int


@dataclass(frozen=True)
class CreditDecision:
    """Output of credit-limit resolution"""

    has_limit: bool
    limit: int


@dataclass
class PersistedUser:
    """Accepted applicant together with its credit decision"""

    firstname: str
    surname: str
    email: str
    date_of_birth: date
    client: Client
    has_credit_limit: bool
    credit_limit: int
    id: Optional[int] = None


@dataclass
class EligibilityResult:
    """Outcome of a single evaluation"""

    accepted: bool
    reason: Optional[RejectionReason] = None
    credit_decision: Optional[CreditDecision] = None
    user: Optional[PersistedUser] = None
