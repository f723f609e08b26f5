#!/usr/bin/env python3
"""
Store Check Script

Run this to verify the configured store is reachable and initialized.
Usage: python scripts/check_store.py
"""
import sys
sys.path.insert(0, '.')

from school_api.core.config import get_settings
from school_api.db.store import Store
from school_api.repositories import StudentRepository, ContactRepository
from school_api.utils.logger import configure_logging


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    store = Store.from_settings(settings)
    print("=" * 50)
    print("SCHOOL RECORDS - STORE CHECK")
    print("=" * 50)

    print("\n[1] Testing connection...")
    print(f"    URL: {store.engine.url.render_as_string(hide_password=True)}")
    if not store.ping():
        print("    ❌ Store: FAILED")
        return 1
    print("    ✅ Store: CONNECTED")

    print("\n[2] Checking tables...")
    tables = set(store.table_names())
    for name in ("student", "student_contact"):
        print(f"    {'✅' if name in tables else '⚠️ '} {name}")

    if {"student", "student_contact"} <= tables:
        print("\n[3] Row counts...")
        print(f"    students: {len(StudentRepository(store).list_all())}")
        print(f"    contacts: {len(ContactRepository(store).list_all())}")
    else:
        print("\n    Tables missing - start the API once to create them")

    store.close()
    print("\n" + "=" * 50)
    print("Store check complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
