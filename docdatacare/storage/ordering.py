"""
Ordering and matching rules shared by every storage backend.

Both backends sort and filter in Python with these helpers, so list and
search results do not depend on how a backend stores dates or text.
"""
from datetime import datetime
from functools import cmp_to_key
from typing import Iterable, List, Optional

from ..schemas.patient import PatientRecord


def parse_visit_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO calendar date or date-time. Unparseable text counts as absent."""
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        # fromisoformat only understands a "Z" suffix from Python 3.11
        text = text[:-1] + "+00:00"
    try:
        # Plain dates ("2024-06-01") parse as midnight
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    # Compare everything as naive timestamps
    if parsed.tzinfo is not None:
        parsed = parsed.replace(tzinfo=None) - parsed.utcoffset()
    return parsed


def _compare_names(a: str, b: str) -> int:
    key_a, key_b = (a.casefold(), a), (b.casefold(), b)
    return (key_a > key_b) - (key_a < key_b)


def compare_patients(a: PatientRecord, b: PatientRecord) -> int:
    """Most recent visit first when both sides have a visit date, otherwise by name.

    This is not a total order across dated and undated records:
    a pair is compared by date only when both dates parse.
    """
    date_a = parse_visit_date(a.visit_date)
    date_b = parse_visit_date(b.visit_date)
    if date_a is not None and date_b is not None:
        return (date_a < date_b) - (date_a > date_b)
    return _compare_names(a.name, b.name)


def sort_patients(patients: Iterable[PatientRecord]) -> List[PatientRecord]:
    return sorted(patients, key=cmp_to_key(compare_patients))


def matches_query(patient: PatientRecord, query: str) -> bool:
    """Case-insensitive substring match on name, contact number or symptoms."""
    needle = query.lower()
    if needle in patient.name.lower():
        return True
    if patient.contact_number is not None and needle in patient.contact_number.lower():
        return True
    return needle in patient.disease_symptoms.lower()
