"""
Student Contact Routes

GET /student_contacts - List all contacts
GET /student_contacts/query?mobile= - Find contacts by mobile number
GET /student_contacts/{id} - Get the contact of a student
GET /students-with-contacts/{id} - Student joined with its contact

Contacts are read-only over HTTP.
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from school_api.api.deps import get_contact_repo
from school_api.core.errors import NotFound
from school_api.repositories import ContactRepository
from school_api.schemas.schemas import ContactResponse, StudentWithContactResponse

router = APIRouter(tags=["Student Contacts"])


@router.get("/student_contacts", response_model=List[ContactResponse])
def list_contacts(repo: ContactRepository = Depends(get_contact_repo)):
    """Get all student contacts."""
    return repo.list_all()


# Must be registered before /student_contacts/{student_id}
@router.get("/student_contacts/query", response_model=List[ContactResponse])
def query_contacts(
    mobile: Optional[str] = Query(None, description="Exact mobile number"),
    repo: ContactRepository = Depends(get_contact_repo)
):
    """Find contacts by exact mobile number."""
    contacts = repo.find_by_mobile(mobile)
    if not contacts:
        raise NotFound("No student contact found with the provided mobile number")
    return contacts


@router.get("/student_contacts/{student_id}", response_model=ContactResponse)
def get_contact(student_id: str, repo: ContactRepository = Depends(get_contact_repo)):
    """Get a student's contact by studentid."""
    contact = repo.get_by_student_id(student_id)
    if contact is None:
        raise NotFound("Student contact not found")
    return contact


@router.get("/students-with-contacts/{student_id}", response_model=StudentWithContactResponse)
def get_student_with_contact(student_id: str, repo: ContactRepository = Depends(get_contact_repo)):
    """Get a student together with its contact details (null if it has none)."""
    student = repo.get_student_with_contact(student_id)
    if student is None:
        raise NotFound("Student not found")
    return student
