"""
FastAPI dependencies - hand the app's Store to the repositories.

Usage:
    @router.get("/students")
    async def list_students(repo: StudentRepository = Depends(get_student_repo)):
        ...
"""

from fastapi import Depends, Request

from school_api.db.store import Store
from school_api.repositories import StudentRepository, ContactRepository


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_student_repo(store: Store = Depends(get_store)) -> StudentRepository:
    return StudentRepository(store)


def get_contact_repo(store: Store = Depends(get_store)) -> ContactRepository:
    return ContactRepository(store)
