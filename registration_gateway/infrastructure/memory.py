"""
In-memory client directory and user store.

Each instance owns its own state, so separate runs and tests never share
clients or users.
"""

import logging
from typing import Dict, List, Optional

from registration_gateway.domain.exceptions import ClientAlreadyExistsError
from registration_gateway.domain.interfaces import ClientDirectory, PersistenceSink
from registration_gateway.domain.models import Client, ClientStatus, ClientTier, PersistedUser

logger = logging.getLogger(__name__)


class InMemoryClientDirectory(ClientDirectory):
    def __init__(self):
        self._clients: Dict[int, Client] = {}

    def get_by_id(self, client_id: int) -> Optional[Client]:
        return self._clients.get(client_id)

    def create_client(self, client_id: int, name: str) -> Client:
        existing = self._clients.get(client_id)
        if existing is not None:
            if existing.name != name:
                raise ClientAlreadyExistsError(
                    f"Client {client_id} already registered as {existing.name}"
                )
            return existing

        client = Client(
            id=client_id,
            name=name,
            tier=ClientTier.from_name(name),
            status=ClientStatus.NONE,
        )
        self._clients[client_id] = client
        logger.debug("Created client %s (%s)", client_id, client.tier.name)
        return client


class InMemoryUserStore(PersistenceSink):
    def __init__(self):
        self._users: List[PersistedUser] = []

    @property
    def users(self) -> List[PersistedUser]:
        return list(self._users)

    def save(self, user: PersistedUser) -> None:
        user.id = len(self._users) + 1
        self._users.append(user)

    def list_by_client(self, client_id: int) -> List[PersistedUser]:
        return [u for u in reversed(self._users) if u.client.id == client_id]
