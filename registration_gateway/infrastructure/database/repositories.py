"""Data access layer for clients and registered users"""

from typing import List, Optional
from sqlalchemy.orm import Session
from registration_gateway.infrastructure.database.models import ClientRecord, UserRecord
from registration_gateway.domain.exceptions import ClientAlreadyExistsError
from registration_gateway.domain.interfaces import ClientDirectory, PersistenceSink
from registration_gateway.domain.models import Client, ClientStatus, ClientTier, PersistedUser


def _to_client(record: ClientRecord) -> Client:
    return Client(
        id=record.id,
        name=record.name,
        tier=ClientTier.from_name(record.name),
        status=ClientStatus(record.status),
    )


class SqlClientDirectory(ClientDirectory):
    """Repository for clients"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, client_id: int) -> Optional[Client]:
        """Fetch client by id, None if unknown"""
        record = self.db.get(ClientRecord, client_id)
        return _to_client(record) if record else None

    def create_client(self, client_id: int, name: str) -> Client:
        """Persist a new client; creating the same client twice is a no-op"""
        existing = self.db.get(ClientRecord, client_id)
        if existing is not None:
            if existing.name != name:
                raise ClientAlreadyExistsError(
                    f"Client {client_id} already registered as {existing.name}"
                )
            return _to_client(existing)

        record = ClientRecord(id=client_id, name=name, status=ClientStatus.NONE.value)
        self.db.add(record)
        self.db.flush()
        return _to_client(record)


class SqlUserRepository(PersistenceSink):
    """Repository for registered users"""

    def __init__(self, db: Session):
        self.db = db

    def save(self, user: PersistedUser) -> None:
        """Persist accepted applicant; caller owns the transaction"""
        record = UserRecord(
            client_id=user.client.id,
            firstname=user.firstname,
            surname=user.surname,
            email=user.email,
            date_of_birth=user.date_of_birth,
            has_credit_limit=user.has_credit_limit,
            credit_limit=user.credit_limit,
        )
        self.db.add(record)
        self.db.flush()  # Get ID without committing
        user.id = record.id

    def list_by_client(self, client_id: int) -> List[PersistedUser]:
        """Fetch users for a client, newest first"""
        records = (
            self.db.query(UserRecord)
            .filter(UserRecord.client_id == client_id)
            .order_by(UserRecord.id.desc())
            .all()
        )
        return [
            PersistedUser(
                id=r.id,
                firstname=r.firstname,
                surname=r.surname,
                email=r.email,
                date_of_birth=r.date_of_birth,
                client=_to_client(r.client),
                has_credit_limit=r.has_credit_limit,
                credit_limit=r.credit_limit,
            )
            for r in records
        ]
