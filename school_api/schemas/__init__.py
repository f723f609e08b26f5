"""
Schemas module - Request/Response schemas for API endpoints.

- Request schemas (what the API accepts)
- Response schemas (what the API returns)
"""
from school_api.schemas.schemas import (
    StudentCreate, StudentUpdate, StudentResponse,
    ContactDetails, ContactResponse, StudentWithContactResponse,
    MessageResponse, ErrorResponse, HealthResponse,
)

__all__ = [
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
    "ContactDetails",
    "ContactResponse",
    "StudentWithContactResponse",
    "MessageResponse",
    "ErrorResponse",
    "HealthResponse",
]
