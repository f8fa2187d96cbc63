"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from registration_gateway.domain.interfaces import CreditLimitService
from registration_gateway.infrastructure.clients.credit import CreditServiceClient
from registration_gateway.infrastructure.database.session import get_db
from registration_gateway.service import UserService, build_user_service


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_credit_service() -> CreditLimitService:
    """Provide credit service client instance"""
    return CreditServiceClient()


def get_user_service(
    db: Session = Depends(get_db),
    credit_service: CreditLimitService = Depends(get_credit_service),
) -> UserService:
    """Provide database-backed registration service"""
    return build_user_service(db, credit_service)
