"""
Database module - relational store adapter and seed data.
"""
from school_api.db.store import Store

__all__ = [
    "Store",
]
