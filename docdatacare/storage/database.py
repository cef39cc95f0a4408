"""
Relational storage backend (SQLAlchemy).

Each operation runs in its own short-lived session that is committed or
rolled back before returning. SQLAlchemy failures are logged and re-raised
as ``StorageError`` so callers can tell them apart from validation
failures and not-found results.
"""
import logging
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import DuplicateUsernameError, StorageError
from ..core.security import get_password_hash
from ..models.base import Base, generate_uuid, make_session_factory
from ..models.patient import Patient
from ..models.user import User
from ..schemas.patient import Gender, PatientCreate, PatientRecord, PatientUpdate
from ..schemas.user import UserCreate, UserRecord
from .base import Storage
from .ordering import matches_query, sort_patients

logger = logging.getLogger(__name__)


def _column_values(values: Dict[str, Any]) -> Dict[str, Any]:
    """Convert validated schema values to what the ORM columns expect."""
    values = dict(values)
    if values.get("gender") is not None:
        values["gender"] = Gender(values["gender"]).value
    if values.get("fee") is not None:
        values["fee"] = Decimal(values["fee"].strip())
    return values


class DatabaseStorage(Storage):
    backend_name = "database"

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = make_session_factory(engine)

    def create_tables(self) -> None:
        """Create missing tables. Managed deployments use Alembic instead."""
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Storage operation %s failed", operation)
            raise StorageError(f"{operation} failed: {exc}") from exc
        finally:
            db.close()

    # ── Users ────────────────────────────────────────────────────────────

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self._session("get_user") as db:
            user = db.get(User, user_id)
            return UserRecord.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self._session("get_user_by_username") as db:
            user = db.query(User).filter(User.username == username).first()
            return UserRecord.model_validate(user) if user else None

    def create_user(self, user_in: UserCreate) -> UserRecord:
        hashed = get_password_hash(user_in.password)
        db = self.session_factory()
        try:
            if db.query(User).filter(User.username == user_in.username).first():
                raise DuplicateUsernameError(user_in.username)
            user = User(id=generate_uuid(), username=user_in.username, password=hashed)
            db.add(user)
            db.commit()
            record = UserRecord.model_validate(user)
        except IntegrityError as exc:
            # Lost a race with a concurrent insert of the same username
            db.rollback()
            raise DuplicateUsernameError(user_in.username) from exc
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Storage operation create_user failed")
            raise StorageError(f"create_user failed: {exc}") from exc
        finally:
            db.close()
        logger.info("User created: %s", record.id)
        return record

    def count_users(self) -> int:
        with self._session("count_users") as db:
            return db.query(User).count()

    # ── Patients ─────────────────────────────────────────────────────────

    def get_patient(self, patient_id: str) -> Optional[PatientRecord]:
        with self._session("get_patient") as db:
            patient = db.get(Patient, patient_id)
            return PatientRecord.model_validate(patient) if patient else None

    def _all_records(self, operation: str) -> List[PatientRecord]:
        with self._session(operation) as db:
            return [PatientRecord.model_validate(p) for p in db.query(Patient).all()]

    def get_all_patients(self) -> List[PatientRecord]:
        # visit_date is free text, so ordering happens after parsing in Python
        return sort_patients(self._all_records("get_all_patients"))

    def create_patient(self, patient_in: PatientCreate) -> PatientRecord:
        with self._session("create_patient") as db:
            patient = Patient(id=generate_uuid(), **_column_values(patient_in.model_dump()))
            db.add(patient)
            db.flush()
            db.refresh(patient)
            record = PatientRecord.model_validate(patient)
        logger.info("Patient created: %s", record.id)
        return record

    def update_patient(self, patient_id: str, patient_in: PatientUpdate) -> Optional[PatientRecord]:
        with self._session("update_patient") as db:
            patient = db.get(Patient, patient_id)
            if patient is None:
                logger.debug("Update skipped, patient not found: %s", patient_id)
                return None
            for field, value in _column_values(patient_in.changes()).items():
                setattr(patient, field, value)
            db.flush()
            db.refresh(patient)
            record = PatientRecord.model_validate(patient)
        logger.info("Patient updated: %s", patient_id)
        return record

    def delete_patient(self, patient_id: str) -> bool:
        with self._session("delete_patient") as db:
            deleted = db.query(Patient).filter(Patient.id == patient_id).delete()
        if deleted:
            logger.info("Patient deleted: %s", patient_id)
        return bool(deleted)

    def search_patients(self, query: str) -> List[PatientRecord]:
        return [p for p in self._all_records("search_patients") if matches_query(p, query)]

    def count_patients(self) -> int:
        with self._session("count_patients") as db:
            return db.query(Patient).count()
