"""
Student Routes

GET /students - List all students
GET /students/{id} - Get one student
GET /students-query?firstname=&lastname= - Find students by exact name
POST /students - Create student
PUT /students/{id} - Update student (studentid never changes)
DELETE /students/{id} - Delete student
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from school_api.api.deps import get_student_repo
from school_api.core.errors import NotFound
from school_api.repositories import StudentRepository
from school_api.schemas.schemas import (
    StudentCreate, StudentUpdate, StudentResponse, MessageResponse
)

router = APIRouter(tags=["Students"])


@router.get("/students", response_model=List[StudentResponse])
def list_students(repo: StudentRepository = Depends(get_student_repo)):
    """Get all students in insertion order."""
    return repo.list_all()


@router.get("/students-query", response_model=List[StudentResponse])
def query_students(
    firstname: Optional[str] = Query(None, description="Exact first name"),
    lastname: Optional[str] = Query(None, description="Exact last name"),
    repo: StudentRepository = Depends(get_student_repo)
):
    """Find students by exact, case-sensitive first and last name."""
    students = repo.find_by_name(firstname, lastname)
    if not students:
        raise NotFound("Student not found with given firstname and lastname")
    return students


@router.get("/students/{student_id}", response_model=StudentResponse)
def get_student(student_id: str, repo: StudentRepository = Depends(get_student_repo)):
    """Get a student by studentid."""
    student = repo.get_by_id(student_id)
    if student is None:
        raise NotFound("Student not found")
    return student


@router.post("/students", response_model=StudentResponse, status_code=201)
def create_student(data: StudentCreate, repo: StudentRepository = Depends(get_student_repo)):
    """Create a student. All six fields are required."""
    return repo.create(data.model_dump())


@router.put("/students/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: str,
    data: StudentUpdate,
    repo: StudentRepository = Depends(get_student_repo)
):
    """Replace a student's details. Any studentid in the body is ignored."""
    return repo.update(student_id, data.model_dump())


@router.delete("/students/{student_id}", response_model=MessageResponse)
def delete_student(student_id: str, repo: StudentRepository = Depends(get_student_repo)):
    """Delete a student and its contact."""
    repo.delete(student_id)
    return MessageResponse(message="Student deleted successfully")
