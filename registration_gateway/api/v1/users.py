"""POST /v1/users - user registration, GET /v1/users - registered users by client"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from registration_gateway.api.v1.schemas import UserRequest, UserResponse, UserItem, UserListResponse
from registration_gateway.api.dependencies import get_request_id, get_user_service
from registration_gateway.infrastructure.database.session import get_db
from registration_gateway.infrastructure.database.repositories import SqlUserRepository
from registration_gateway.domain.exceptions import CreditServiceError
from registration_gateway.domain.models import Applicant
from registration_gateway.infrastructure.observability.metrics import (
    record_registration,
    credit_service_failures_counter,
)
from registration_gateway.infrastructure.observability.logging import log_registration
from registration_gateway.service import UserService

router = APIRouter()


@router.post("/users", response_model=UserResponse)
def create_user(
    request_body: UserRequest,
    request: Request,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a user if they pass eligibility checks.

    Flow:
    1. Validate name, email and age
    2. Look up the client and resolve the credit limit for its tier
    3. Reject applicants below the credit threshold
    4. Persist the accepted user
    5. Return the outcome, including the rejection reason
    """
    start_time = time.time()
    request_id = get_request_id(request)

    applicant = Applicant(
        firstname=request_body.firstname,
        surname=request_body.surname,
        email=request_body.email,
        date_of_birth=request_body.date_of_birth,
        client_id=request_body.client_id,
    )

    try:
        result = user_service.register(applicant)
        db.commit()

    except CreditServiceError as e:
        credit_service_failures_counter.inc()
        db.rollback()
        logging.error(f"Credit service error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Credit service unavailable")

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    reason = result.reason.value if result.reason else None
    decision = result.credit_decision

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_registration(result.accepted, reason, decision)
    log_registration(
        request_id,
        request_body.client_id,
        result.accepted,
        reason,
        decision.limit if decision and decision.has_limit else None,
        duration_ms,
    )

    return UserResponse(
        accepted=result.accepted,
        reason=reason,
        has_credit_limit=decision.has_limit if decision else None,
        credit_limit=decision.limit if decision else None,
        user_id=result.user.id if result.user else None,
    )


@router.get("/users", response_model=UserListResponse)
def list_users(
    client_id: int = Query(..., description="Client identifier"),
    db: Session = Depends(get_db),
):
    """Retrieve users registered under a client, newest first"""
    user_repo = SqlUserRepository(db)
    users = user_repo.list_by_client(client_id)

    return UserListResponse(
        client_id=client_id,
        users=[
            UserItem(
                user_id=u.id,
                firstname=u.firstname,
                surname=u.surname,
                email=u.email,
                date_of_birth=u.date_of_birth,
                has_credit_limit=u.has_credit_limit,
                credit_limit=u.credit_limit,
            )
            for u in users
        ],
    )
