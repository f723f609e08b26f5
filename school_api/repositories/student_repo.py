"""
Data access layer for students.
All SQL queries related to the `student` table live here.
"""

from typing import Any, List, Mapping, Optional

from sqlalchemy import text

from school_api.core.errors import InvalidArgument, NotFound
from school_api.db.store import Store
from school_api.repositories.validation import missing_fields, parse_id, to_db_value
from school_api.utils.logger import get_logger

logger = get_logger(__name__)

STUDENT_FIELDS = ("studentid", "firstname", "lastname", "dateofbirth", "grade", "gender")

# studentid is the primary key and is never rewritten
UPDATABLE_FIELDS = ("firstname", "lastname", "dateofbirth", "grade", "gender")

SELECT_STUDENT = """
    SELECT studentid, firstname, lastname, dateofbirth, grade, gender
    FROM student
"""


class StudentRepository:
    """Repository for CRUD operations on the student table."""

    def __init__(self, store: Store):
        self.store = store

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> List[dict]:
        """All students in insertion order. Empty list if there are none."""
        return self.store.execute_raw_sql(SELECT_STUDENT + " ORDER BY rowid")

    def get_by_id(self, student_id: Any) -> Optional[dict]:
        """
        Fetch a single student by primary key.

        Raises:
            InvalidArgument: If the id is not a well-formed integer.

        Returns:
            The student row, or None if not found.
        """
        sid = parse_id(student_id)
        rows = self.store.execute_raw_sql(
            SELECT_STUDENT + " WHERE studentid = :id",
            {"id": sid}
        )
        return rows[0] if rows else None

    def find_by_name(self, firstname: Optional[str], lastname: Optional[str]) -> List[dict]:
        """
        Exact, case-sensitive match on both first and last name.

        Raises:
            InvalidArgument: If either name is missing.
        """
        if not firstname or not lastname:
            raise InvalidArgument("Both firstname and lastname are required")
        return self.store.execute_raw_sql(
            SELECT_STUDENT + " WHERE firstname = :firstname AND lastname = :lastname ORDER BY rowid",
            {"firstname": firstname, "lastname": lastname}
        )

    # ── CREATE ────────────────────────────────────────────

    def create(self, record: Mapping[str, Any]) -> dict:
        """
        Insert a new student.

        Args:
            record: Must carry all six student fields.

        Raises:
            InvalidArgument: If any field is missing.
            ConstraintViolation: On grade/gender check failure or duplicate studentid.

        Returns:
            The stored row.
        """
        missing = missing_fields(record, STUDENT_FIELDS)
        if missing:
            logger.info(f"Rejected student create, missing: {', '.join(missing)}")
            raise InvalidArgument("All fields are required")

        params = {field: to_db_value(record[field]) for field in STUDENT_FIELDS}
        params["studentid"] = parse_id(params["studentid"])

        with self.store.session() as db:
            db.execute(
                text("""
                    INSERT INTO student (studentid, firstname, lastname, dateofbirth, grade, gender)
                    VALUES (:studentid, :firstname, :lastname, :dateofbirth, :grade, :gender)
                """),
                params
            )

        logger.info(f"Added student #{params['studentid']}")
        return self.get_by_id(params["studentid"])

    # ── UPDATE ────────────────────────────────────────────

    def update(self, student_id: Any, fields: Mapping[str, Any]) -> dict:
        """
        Replace every field except studentid. A studentid in `fields` is ignored.

        Raises:
            InvalidArgument: On a malformed id or a missing field.
            NotFound: If no student has this id.
            ConstraintViolation: On grade/gender check failure.
        """
        sid = parse_id(student_id)
        missing = missing_fields(fields, UPDATABLE_FIELDS)
        if missing:
            logger.info(f"Rejected update of student #{sid}, missing: {', '.join(missing)}")
            raise InvalidArgument("All fields are required")

        params = {field: to_db_value(fields[field]) for field in UPDATABLE_FIELDS}
        params["id"] = sid

        with self.store.session() as db:
            result = db.execute(
                text("""
                    UPDATE student
                    SET firstname = :firstname, lastname = :lastname, dateofbirth = :dateofbirth,
                        grade = :grade, gender = :gender
                    WHERE studentid = :id
                """),
                params
            )
            if result.rowcount == 0:
                raise NotFound("Student not found")

        logger.info(f"Updated student #{sid}")
        return self.get_by_id(sid)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, student_id: Any) -> None:
        """
        Delete a student. Its contact goes with it (ON DELETE CASCADE).

        Raises:
            InvalidArgument: On a malformed id.
            NotFound: If no student has this id.
        """
        sid = parse_id(student_id)
        with self.store.session() as db:
            result = db.execute(
                text("DELETE FROM student WHERE studentid = :id"),
                {"id": sid}
            )
            if result.rowcount == 0:
                raise NotFound("Student not found")

        logger.info(f"Deleted student #{sid}")
