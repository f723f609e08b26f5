"""
Store Adapter - owns the SQLAlchemy engine, sessions and the schema.

Tables:
- student: one row per student, studentid assigned by the client
- student_contact: at most one contact per student (studentid is the key)

Domain rules (grade range, gender values, mobile length) are enforced by
CHECK constraints here and nowhere else.
"""

from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session

from school_api.core.config import Settings
from school_api.core.errors import ConstraintViolation, StoreError
from school_api.db.seed import SAMPLE_STUDENTS, SAMPLE_CONTACTS
from school_api.utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = [
    """
    CREATE TABLE IF NOT EXISTS student (
        studentid   INTEGER PRIMARY KEY NOT NULL,
        firstname   TEXT NOT NULL CHECK (length(firstname) > 0),
        lastname    TEXT NOT NULL CHECK (length(lastname) > 0),
        dateofbirth DATE NOT NULL,
        grade       INTEGER NOT NULL CHECK (grade BETWEEN 1 AND 8),
        gender      TEXT NOT NULL CHECK (gender IN ('Male', 'Female'))
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_student_grade ON student(grade)",
    "CREATE INDEX IF NOT EXISTS idx_student_gender ON student(gender)",
    """
    CREATE TABLE IF NOT EXISTS student_contact (
        studentid    INTEGER PRIMARY KEY NOT NULL
                     REFERENCES student(studentid) ON DELETE CASCADE,
        email        TEXT,
        mblnumber    TEXT CHECK (length(mblnumber) <= 10),
        address      TEXT,
        guardianname TEXT
    )
    """,
]

# Child table first so the foreign key never dangles
DROP_SQL = [
    "DROP TABLE IF EXISTS student_contact",
    "DROP TABLE IF EXISTS student",
]

INSERT_STUDENT_SQL = """
    INSERT INTO student (studentid, firstname, lastname, dateofbirth, grade, gender)
    VALUES (:studentid, :firstname, :lastname, :dateofbirth, :grade, :gender)
"""

INSERT_CONTACT_SQL = """
    INSERT INTO student_contact (studentid, email, mblnumber, address, guardianname)
    VALUES (:studentid, :email, :mblnumber, :address, :guardianname)
"""


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite leaves foreign keys off unless asked, per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def _error_message(error: SQLAlchemyError) -> str:
    """Driver message without SQLAlchemy's statement dump."""
    return str(getattr(error, "orig", None) or error)


class Store:
    """Relational store holding the student and student_contact tables."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        is_sqlite = database_url.startswith("sqlite")

        # Handlers may run on different threads than the one that opened
        # the connection
        connect_args = {"check_same_thread": False} if is_sqlite else {}
        self.engine = create_engine(
            database_url,
            echo=echo,  # Log SQL queries in debug mode
            connect_args=connect_args,
        )
        if is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        # Session factory
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Store":
        return cls(settings.database_url, echo=settings.debug)

    @contextmanager
    def session(self):
        """
        Context manager for database sessions.
        Usage:
            with store.session() as db:
                db.execute(text("SELECT * FROM student"))

        Commits on success, rolls back on any error. Store failures are
        re-raised as ConstraintViolation or StoreError.
        """
        session: Session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except IntegrityError as e:
            session.rollback()
            message = _error_message(e)
            logger.warning(f"Constraint violation: {message}")
            raise ConstraintViolation(message) from e
        except SQLAlchemyError as e:
            session.rollback()
            message = _error_message(e)
            logger.error(f"Store error: {message}")
            raise StoreError(message) from e
        except OverflowError as e:
            # sqlite3 binds integers as signed 64-bit and raises before SQLAlchemy sees it
            session.rollback()
            logger.warning(f"Integer out of range: {e}")
            raise ConstraintViolation("Integer value out of range") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def execute_raw_sql(self, sql: str, params: Optional[dict] = None) -> List[dict]:
        """
        Execute raw SQL and return results as list of dicts.
        """
        with self.session() as db:
            result = db.execute(text(sql), params or {})
            if not result.returns_rows:
                return []
            columns = list(result.keys())
            return [dict(zip(columns, row)) for row in result.fetchall()]

    def has_table(self, name: str) -> bool:
        return inspect(self.engine).has_table(name)

    def table_names(self) -> List[str]:
        return inspect(self.engine).get_table_names()

    def initialize(self, reset_on_start: bool = False, seed: bool = True) -> bool:
        """
        Create the schema and seed sample rows.

        With reset_on_start, both tables are dropped and recreated, losing
        all data. Otherwise tables are created only if absent and existing
        rows are kept. Sample rows go in only when the student table is new.

        Returns True when sample rows were inserted.
        """
        fresh = reset_on_start or not self.has_table("student")

        with self.session() as db:
            if reset_on_start:
                logger.warning("reset_on_start is set, dropping all tables")
                for statement in DROP_SQL:
                    db.execute(text(statement))

            for statement in SCHEMA_SQL:
                db.execute(text(statement))

            if fresh and seed:
                db.execute(text(INSERT_STUDENT_SQL), SAMPLE_STUDENTS)
                db.execute(text(INSERT_CONTACT_SQL), SAMPLE_CONTACTS)

        seeded = fresh and seed
        if seeded:
            logger.info(
                f"Seeded {len(SAMPLE_STUDENTS)} students and {len(SAMPLE_CONTACTS)} contacts"
            )
        logger.info(f"Store initialized at {self.engine.url.render_as_string(hide_password=True)}")
        return seeded

    def ping(self) -> bool:
        """
        Test if the store is reachable.
        Returns True if connection successful, False otherwise.
        """
        try:
            rows = self.execute_raw_sql("SELECT 1 AS test")
            return rows[0]["test"] == 1
        except StoreError as e:
            logger.error(f"Store connection failed: {e}")
            return False

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Store connection closed.")
