"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Request fields are optional at this layer so that a missing field is
reported by the repositories as a 400 "All fields are required" rather
than a schema error. Range and membership rules are left to the store.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import date


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentCreate(BaseModel):
    studentid: Optional[int] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    dateofbirth: Optional[date] = None
    grade: Optional[int] = None
    gender: Optional[str] = None

class StudentUpdate(BaseModel):
    # No studentid: the primary key is never part of an update
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    dateofbirth: Optional[date] = None
    grade: Optional[int] = None
    gender: Optional[str] = None

class StudentResponse(BaseModel):
    studentid: int
    firstname: str
    lastname: str
    dateofbirth: date
    grade: int
    gender: str


# ============================================================
# CONTACT SCHEMAS
# ============================================================

class ContactDetails(BaseModel):
    email: Optional[str] = None
    mblnumber: Optional[str] = None
    address: Optional[str] = None
    guardianname: Optional[str] = None

class ContactResponse(ContactDetails):
    studentid: int

class StudentWithContactResponse(StudentResponse):
    contact: Optional[ContactDetails] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str
    store: str
