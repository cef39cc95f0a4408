"""
Demo data seeder for DocDataCare.

Creates a demo clinic user with known credentials plus a handful of patient
records so the list and search views have something to show right after a
fresh start.

Credentials (printed to stdout on first run):
  Reception: reception_demo / Demo1234!

Safe to call on every startup: users are looked up by username and
patients are only seeded into an empty store.
"""
from .schemas.validation import validate_patient_create, validate_user_create
from .storage.base import Storage

DEMO_USERNAME = "reception_demo"
DEMO_PASSWORD = "Demo1234!"

DEMO_PATIENTS = [
    {
        "name": "Asha Verma",
        "age": 34,
        "gender": "Female",
        "contactNumber": "+91 98765 43210",
        "visitDate": "2024-06-01",
        "followupDate": "2024-06-15",
        "diseaseSymptoms": "Seasonal fever, sore throat",
        "prescriptionTreatment": "Paracetamol 500mg",
        "dose": "1 tablet twice daily",
        "fee": "300.00",
    },
    {
        "name": "Ravi Kumar",
        "age": 58,
        "gender": "Male",
        "visitDate": "2024-01-10",
        "diseaseSymptoms": "Type 2 diabetes follow-up",
        "prescriptionTreatment": "Metformin 500mg",
        "dose": "1 tablet after dinner",
        "fee": "500.00",
    },
    {
        "name": "Sam Okafor",
        "age": 7,
        "gender": "Other",
        "diseaseSymptoms": "Mild rash on forearm",
    },
]


def seed_demo_data(storage: Storage) -> None:
    """Create the demo user and patients if they do not already exist."""
    _seed_user(storage)
    _seed_patients(storage)


# ── helpers ──────────────────────────────────────────────────────────────────

def _seed_user(storage: Storage) -> None:
    if storage.get_user_by_username(DEMO_USERNAME) is None:
        storage.create_user(validate_user_create({"username": DEMO_USERNAME, "password": DEMO_PASSWORD}))
        print(f"[seed] Created demo user    : {DEMO_USERNAME} / {DEMO_PASSWORD}")


def _seed_patients(storage: Storage) -> None:
    if storage.count_patients():
        return
    for payload in DEMO_PATIENTS:
        patient = storage.create_patient(validate_patient_create(payload))
        print(f"[seed] Created demo patient : {patient.name} (id: {patient.id})")
