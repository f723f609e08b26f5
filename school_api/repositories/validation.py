"""Input checks shared by the repositories."""

from datetime import date
from typing import Any, Iterable, List, Mapping

from school_api.core.errors import InvalidArgument

# SQLite INTEGER is a signed 64-bit value
MIN_ID = -2**63
MAX_ID = 2**63 - 1


def parse_id(value: Any) -> int:
    """Coerce a path, query or body id to int, raising InvalidArgument if malformed."""
    if isinstance(value, bool):
        raise InvalidArgument("Invalid ID format")
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except (TypeError, ValueError):
            raise InvalidArgument("Invalid ID format") from None
    if not MIN_ID <= parsed <= MAX_ID:
        raise InvalidArgument("Invalid ID format")
    return parsed


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def missing_fields(record: Mapping[str, Any], fields: Iterable[str]) -> List[str]:
    return [field for field in fields if is_missing(record.get(field))]


def to_db_value(value: Any) -> Any:
    # sqlite3's implicit date adapter is deprecated
    if isinstance(value, date):
        return value.isoformat()
    return value
