"""
Data access layer for student contacts.
Read-only: contacts are created by seeding and removed with their student.
"""

from typing import Any, List, Optional

from school_api.core.errors import InvalidArgument
from school_api.db.store import Store
from school_api.repositories.validation import parse_id

CONTACT_DETAIL_FIELDS = ("email", "mblnumber", "address", "guardianname")

SELECT_CONTACT = """
    SELECT studentid, email, mblnumber, address, guardianname
    FROM student_contact
"""


class ContactRepository:
    """Repository for read operations on the student_contact table."""

    def __init__(self, store: Store):
        self.store = store

    def list_all(self) -> List[dict]:
        return self.store.execute_raw_sql(SELECT_CONTACT + " ORDER BY rowid")

    def get_by_student_id(self, student_id: Any) -> Optional[dict]:
        """The contact of one student, or None. InvalidArgument on a malformed id."""
        sid = parse_id(student_id)
        rows = self.store.execute_raw_sql(
            SELECT_CONTACT + " WHERE studentid = :id",
            {"id": sid}
        )
        return rows[0] if rows else None

    def find_by_mobile(self, number: Optional[str]) -> List[dict]:
        """Contacts whose mblnumber equals `number` exactly."""
        if not number:
            raise InvalidArgument("Mobile number is required")
        return self.store.execute_raw_sql(
            SELECT_CONTACT + " WHERE mblnumber = :number ORDER BY rowid",
            {"number": number}
        )

    def get_student_with_contact(self, student_id: Any) -> Optional[dict]:
        """
        Student row joined with its contact details.

        Returns:
            The student fields plus a `contact` key holding
            {email, mblnumber, address, guardianname}, or None under `contact`
            when the student has no contact. None if the student does not exist.
        """
        sid = parse_id(student_id)
        rows = self.store.execute_raw_sql(
            """
            SELECT s.studentid, s.firstname, s.lastname, s.dateofbirth, s.grade, s.gender,
                   c.studentid AS contact_studentid,
                   c.email, c.mblnumber, c.address, c.guardianname
            FROM student s
            LEFT JOIN student_contact c ON c.studentid = s.studentid
            WHERE s.studentid = :id
            """,
            {"id": sid}
        )
        if not rows:
            return None

        row = rows[0]
        has_contact = row.pop("contact_studentid") is not None
        details = {field: row.pop(field) for field in CONTACT_DETAIL_FIELDS}
        row["contact"] = details if has_contact else None
        return row
