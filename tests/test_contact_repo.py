"""Test the student contact repository."""

import pytest

from school_api.core.errors import InvalidArgument
from school_api.db.seed import SAMPLE_CONTACTS
from school_api.repositories import ContactRepository, StudentRepository


def test_list_all(contacts: ContactRepository) -> None:
    """Seeded contacts come back in insertion order."""
    assert contacts.list_all() == SAMPLE_CONTACTS


def test_get_by_student_id(contacts: ContactRepository) -> None:
    # Act
    contact = contacts.get_by_student_id("3")
    # Assert
    assert contact["email"] == "alex@example.com"
    assert contact["guardianname"] == "Guardian Johnson"


def test_get_by_student_id_missing(contacts: ContactRepository) -> None:
    assert contacts.get_by_student_id(999) is None


def test_get_by_student_id_rejects_malformed_id(contacts: ContactRepository) -> None:
    with pytest.raises(InvalidArgument):
        contacts.get_by_student_id("x1")


def test_find_by_mobile(contacts: ContactRepository) -> None:
    """Only Michael Brown's contact has this number."""
    # Act
    rows = contacts.find_by_mobile("5555555555")
    # Assert
    assert len(rows) == 1
    assert rows[0]["studentid"] == 5
    assert rows[0]["guardianname"] == "Guardian Brown"


@pytest.mark.parametrize("number", ["555555555", "55555555550", "0000000000"])
def test_find_by_mobile_exact_match_only(contacts: ContactRepository, number: str) -> None:
    assert contacts.find_by_mobile(number) == []


@pytest.mark.parametrize("number", [None, ""])
def test_find_by_mobile_requires_number(contacts: ContactRepository, number) -> None:
    with pytest.raises(InvalidArgument):
        contacts.find_by_mobile(number)


def test_student_with_contact(contacts: ContactRepository) -> None:
    """Joined view carries the student fields and the contact details."""
    # Act
    joined = contacts.get_student_with_contact(2)
    # Assert
    assert joined["studentid"] == 2
    assert joined["firstname"] == "Jane"
    assert joined["contact"] == {
        "email": "jane@example.com",
        "mblnumber": "2222222222",
        "address": "456 Elm St",
        "guardianname": "Guardian Smith",
    }


def test_student_without_contact(contacts: ContactRepository, students: StudentRepository, new_student: dict) -> None:
    """A student with no contact is returned with contact set to None."""
    # Arrange
    students.create(new_student)
    # Act
    joined = contacts.get_student_with_contact(6)
    # Assert
    assert joined["firstname"] == "New"
    assert joined["contact"] is None


def test_student_with_contact_missing_student(contacts: ContactRepository) -> None:
    assert contacts.get_student_with_contact(999) is None


def test_student_with_contact_rejects_malformed_id(contacts: ContactRepository) -> None:
    with pytest.raises(InvalidArgument):
        contacts.get_student_with_contact("abc")
