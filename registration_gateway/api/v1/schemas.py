"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional


class UserRequest(BaseModel):
    """Request body for POST /v1/users"""

    # Missing names and email are eligibility rejections, not 422s
    firstname: Optional[str] = Field(None, description="Applicant first name")
    surname: Optional[str] = Field(None, description="Applicant surname")
    email: Optional[str] = Field(None, description="Applicant email address")
    date_of_birth: date
    client_id: int


class UserResponse(BaseModel):
    """Response for POST /v1/users"""

    accepted: bool
    reason: Optional[str] = None
    has_credit_limit: Optional[bool] = None
    credit_limit: Optional[int] = None
    user_id: Optional[int] = None


class UserItem(BaseModel):
    """Single registered user"""

    user_id: int
    firstname: str
    surname: str
    email: str
    date_of_birth: date
    has_credit_limit: bool
    credit_limit: int


class UserListResponse(BaseModel):
    """Response for GET /v1/users"""

    client_id: int
    users: List[UserItem]


class ClientRequest(BaseModel):
    """Request body for POST /v1/clients"""

    client_id: int = Field(..., description="Client identifier")
    name: str = Field(..., min_length=1, description="Client type, e.g. ImportantClient")


class ClientResponse(BaseModel):
    """Response for client endpoints"""

    client_id: int
    name: str
    tier: str
    status: str
