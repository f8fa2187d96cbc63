"""POST /v1/clients, GET /v1/clients/{client_id} - client registry"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from registration_gateway.api.v1.schemas import ClientRequest, ClientResponse
from registration_gateway.infrastructure.database.session import get_db
from registration_gateway.infrastructure.database.repositories import SqlClientDirectory
from registration_gateway.domain.exceptions import ClientAlreadyExistsError
from registration_gateway.domain.models import Client

router = APIRouter()


def _client_response(client: Client) -> ClientResponse:
    return ClientResponse(
        client_id=client.id,
        name=client.name,
        tier=client.tier.name,
        status=client.status.value,
    )


@router.post("/clients", response_model=ClientResponse, status_code=201)
def create_client(request_body: ClientRequest, db: Session = Depends(get_db)):
    """Register a client; repeating an identical request returns the same client"""
    directory = SqlClientDirectory(db)
    try:
        client = directory.create_client(request_body.client_id, request_body.name)
    except ClientAlreadyExistsError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))

    db.commit()
    return _client_response(client)


@router.get("/clients/{client_id}", response_model=ClientResponse)
def get_client(client_id: int, db: Session = Depends(get_db)):
    client = SqlClientDirectory(db).get_by_id(client_id)

    if not client:
        raise HTTPException(status_code=404, detail="Client not found")

    return _client_response(client)
