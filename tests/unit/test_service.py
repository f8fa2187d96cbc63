"""Unit tests for the add_user entry point"""

from datetime import date
from registration_gateway.domain.models import Applicant, RejectionReason
from registration_gateway.service import UserService

from conftest import FakeCreditService, TODAY


def make_service(client_directory, user_store, credit_service):
    return UserService(
        client_directory=client_directory,
        credit_service=credit_service,
        persistence=user_store,
        today=lambda: TODAY,
    )


def test_add_user_with_all_parameters_present(client_directory, user_store):
    credit_service = FakeCreditService()
    service = make_service(client_directory, user_store, credit_service)
    client_directory.create_client(27, "VeryImportantClient")

    assert service.add_user("Elton", "John", "elton_john@aol.com", date(1968, 7, 24), 27) is True

    assert len(user_store.users) == 1
    assert user_store.users[0].client.id == 27
    assert credit_service.calls == []


def test_add_user_missing_surname(client_directory, user_store):
    service = make_service(client_directory, user_store, FakeCreditService())

    assert service.add_user("John", "", "john@test.com", date(1990, 1, 1), 1) is False
    assert user_store.users == []


def test_register_returns_reason(client_directory, user_store):
    service = make_service(client_directory, user_store, FakeCreditService(limit=200))

    result = service.register(Applicant("John", "Doe", "john@test.com", date(1990, 1, 1), 2))

    # Important client: 200 doubled is still below the threshold
    assert result.accepted is False
    assert result.reason is RejectionReason.CREDIT_LIMIT_TOO_LOW
    assert result.credit_decision.limit == 400


def test_user_service_holds_only_the_evaluator(client_directory, user_store):
    """Collaborators are owned by the evaluator, not duplicated on the service"""
    service = make_service(client_directory, user_store, FakeCreditService())

    assert list(vars(service)) == ["evaluator"]
    assert service.evaluator.client_directory is client_directory
    assert service.evaluator.persistence is user_store
