"""
Storage contract for patient and user records.

Every backend honours the same semantics:

* ids are assigned by the store, never by the caller, and never change;
* lookups, updates and deletes of unknown ids return ``None``/``False``
  instead of raising;
* ``update_patient`` merges only the fields present in the partial input;
* backend failures surface as :class:`~docdatacare.core.exceptions.StorageError`.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..schemas.patient import PatientCreate, PatientRecord, PatientUpdate
from ..schemas.user import UserCreate, UserRecord


class Storage(ABC):
    backend_name: str = "abstract"

    # ── Users ────────────────────────────────────────────────────────────

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def create_user(self, user_in: UserCreate) -> UserRecord:
        """Store a new user with a hashed password.

        Raises ``DuplicateUsernameError`` if the username is already taken.
        """

    @abstractmethod
    def count_users(self) -> int:
        ...

    # ── Patients ─────────────────────────────────────────────────────────

    @abstractmethod
    def get_patient(self, patient_id: str) -> Optional[PatientRecord]:
        ...

    @abstractmethod
    def get_all_patients(self) -> List[PatientRecord]:
        """All patients, most recent visit first (see ``ordering.compare_patients``)."""

    @abstractmethod
    def create_patient(self, patient_in: PatientCreate) -> PatientRecord:
        ...

    @abstractmethod
    def update_patient(self, patient_id: str, patient_in: PatientUpdate) -> Optional[PatientRecord]:
        ...

    @abstractmethod
    def delete_patient(self, patient_id: str) -> bool:
        ...

    @abstractmethod
    def search_patients(self, query: str) -> List[PatientRecord]:
        ...

    @abstractmethod
    def count_patients(self) -> int:
        ...
