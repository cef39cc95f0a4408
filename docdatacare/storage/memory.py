"""
In-memory storage backend.

Records live in insertion-ordered dicts for the lifetime of the instance.
FastAPI runs sync handlers in a thread pool, so a single lock serializes
every read and write of both collections.
"""
import logging
import threading
from typing import Dict, List, Optional

from ..core.exceptions import DuplicateUsernameError
from ..core.security import get_password_hash
from ..models.base import generate_uuid
from ..schemas.patient import PatientCreate, PatientRecord, PatientUpdate
from ..schemas.user import UserCreate, UserRecord
from .base import Storage
from .ordering import matches_query, sort_patients

logger = logging.getLogger(__name__)


class MemoryStorage(Storage):
    backend_name = "memory"

    def __init__(self):
        self._users: Dict[str, UserRecord] = {}
        self._patients: Dict[str, PatientRecord] = {}
        self._lock = threading.RLock()

    def _new_id(self, taken: Dict[str, object]) -> str:
        record_id = generate_uuid()
        while record_id in taken:
            record_id = generate_uuid()
        return record_id

    # ── Users ────────────────────────────────────────────────────────────

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self._lock:
            return next((u for u in self._users.values() if u.username == username), None)

    def create_user(self, user_in: UserCreate) -> UserRecord:
        hashed = get_password_hash(user_in.password)
        with self._lock:
            if self.get_user_by_username(user_in.username) is not None:
                raise DuplicateUsernameError(user_in.username)
            user = UserRecord(
                id=self._new_id(self._users),
                username=user_in.username,
                password=hashed,
            )
            self._users[user.id] = user
        logger.info("User created: %s", user.id)
        return user

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    # ── Patients ─────────────────────────────────────────────────────────

    def get_patient(self, patient_id: str) -> Optional[PatientRecord]:
        with self._lock:
            return self._patients.get(patient_id)

    def get_all_patients(self) -> List[PatientRecord]:
        with self._lock:
            snapshot = list(self._patients.values())
        return sort_patients(snapshot)

    def create_patient(self, patient_in: PatientCreate) -> PatientRecord:
        with self._lock:
            patient = PatientRecord(id=self._new_id(self._patients), **patient_in.model_dump())
            self._patients[patient.id] = patient
        logger.info("Patient created: %s", patient.id)
        return patient

    def update_patient(self, patient_id: str, patient_in: PatientUpdate) -> Optional[PatientRecord]:
        with self._lock:
            existing = self._patients.get(patient_id)
            if existing is None:
                logger.debug("Update skipped, patient not found: %s", patient_id)
                return None
            updated = existing.model_copy(update=patient_in.changes())
            self._patients[patient_id] = updated
        logger.info("Patient updated: %s", patient_id)
        return updated

    def delete_patient(self, patient_id: str) -> bool:
        with self._lock:
            removed = self._patients.pop(patient_id, None) is not None
        if removed:
            logger.info("Patient deleted: %s", patient_id)
        return removed

    def search_patients(self, query: str) -> List[PatientRecord]:
        with self._lock:
            snapshot = list(self._patients.values())
        return [p for p in snapshot if matches_query(p, query)]

    def count_patients(self) -> int:
        with self._lock:
            return len(self._patients)
