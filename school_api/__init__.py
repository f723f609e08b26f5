"""
School Records API
CRUD service for students and their contact details.

Architecture:
- Store: SQLite through SQLAlchemy, schema and seed data
- Repositories: one per table, raw parameterized SQL
- API: FastAPI routes translating repository results to JSON
"""

__version__ = "1.0.0"
