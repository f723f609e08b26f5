"""
Repositories - data access for each entity, built on an injected Store.
"""
from school_api.repositories.student_repo import StudentRepository
from school_api.repositories.contact_repo import ContactRepository

__all__ = [
    "StudentRepository",
    "ContactRepository",
]
