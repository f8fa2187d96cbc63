"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CreditServiceError(DomainException):
    """Credit limit service returned an error or is unavailable"""

    pass


class ClientAlreadyExistsError(DomainException):
    """A client with the same id but a different type is already registered"""

    pass
