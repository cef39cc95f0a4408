import pytest

from docdatacare.core.exceptions import ValidationError
from docdatacare.schemas.patient import Gender
from docdatacare.schemas.validation import (
    validate_patient_create,
    validate_patient_update,
    validate_user_create,
)


def _patient_payload(**overrides):
    payload = {
        "name": "John Smith",
        "age": 42,
        "gender": "Male",
        "diseaseSymptoms": "Persistent cough",
    }
    payload.update(overrides)
    return payload


class TestPatientCreateValidation:
    def test_minimal_payload_is_accepted(self):
        patient = validate_patient_create(_patient_payload())
        assert patient.name == "John Smith"
        assert patient.age == 42
        assert patient.gender == Gender.MALE
        assert patient.disease_symptoms == "Persistent cough"
        assert patient.contact_number is None
        assert patient.fee is None

    def test_camel_case_optional_fields_are_mapped(self):
        patient = validate_patient_create(_patient_payload(
            contactNumber="+91 98765 43210",
            visitDate="2024-06-01",
            followupDate="2024-06-15",
            prescriptionTreatment="Rest and fluids",
            dose="1 tablet twice daily",
            fee="250.50",
        ))
        assert patient.contact_number == "+91 98765 43210"
        assert patient.visit_date == "2024-06-01"
        assert patient.followup_date == "2024-06-15"
        assert patient.prescription_treatment == "Rest and fluids"
        assert patient.dose == "1 tablet twice daily"
        assert patient.fee == "250.50"

    def test_blank_optional_fields_become_none(self):
        """The registration form submits empty strings for untouched inputs."""
        patient = validate_patient_create(_patient_payload(contactNumber="", visitDate="", fee="  "))
        assert patient.contact_number is None
        assert patient.visit_date is None
        assert patient.fee is None

    def test_age_zero_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_create(_patient_payload(age=0))
        assert exc_info.value.fields == ["age"]
        assert exc_info.value.messages_for("age") == ["Age must be greater than 0"]

    def test_age_151_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_create(_patient_payload(age=151))
        assert exc_info.value.messages_for("age") == ["Age must be less than 150"]

    def test_age_bounds_accepted(self):
        assert validate_patient_create(_patient_payload(age=1)).age == 1
        assert validate_patient_create(_patient_payload(age=150)).age == 150

    def test_age_must_be_integer(self):
        for bad in ("42", 42.5, True):
            with pytest.raises(ValidationError) as exc_info:
                validate_patient_create(_patient_payload(age=bad))
            assert exc_info.value.fields == ["age"]

    def test_unknown_gender_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_create(_patient_payload(gender="Unknown"))
        assert exc_info.value.messages_for("gender") == ["Gender must be one of Male, Female, Other"]

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_create(_patient_payload(name=""))
        assert exc_info.value.messages_for("name") == ["Patient name is required"]

    def test_all_violations_reported_together(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_create(_patient_payload(name="", age=0, gender="Unknown", diseaseSymptoms=""))
        assert set(exc_info.value.fields) == {"name", "age", "gender", "diseaseSymptoms"}
        assert exc_info.value.messages_for("diseaseSymptoms") == ["Disease/Symptoms description is required"]

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_create({})
        err = exc_info.value
        assert set(err.fields) == {"name", "age", "gender", "diseaseSymptoms"}
        assert err.messages_for("gender") == ["Gender is required"]

    def test_fee_rendered_with_two_places(self):
        assert validate_patient_create(_patient_payload(fee="150")).fee == "150.00"
        assert validate_patient_create(_patient_payload(fee=" 99.5 ")).fee == "99.50"
        assert validate_patient_update({"fee": "1e2"}).changes() == {"fee": "100.00"}

    def test_fee_must_be_decimal_amount(self):
        for bad in ("abc", "12.345", "100000000", "NaN"):
            with pytest.raises(ValidationError) as exc_info:
                validate_patient_create(_patient_payload(fee=bad))
            assert exc_info.value.messages_for("fee") == ["Fee must be a decimal amount"]

    def test_unknown_keys_ignored(self):
        patient = validate_patient_create(_patient_payload(id="caller-chosen", extra="x"))
        assert not hasattr(patient, "id")

    def test_error_payload_shape(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_create(_patient_payload(age=0))
        body = exc_info.value.to_dict()
        assert body["detail"] == "Validation failed"
        assert body["errors"] == [{"field": "age", "message": "Age must be greater than 0"}]


class TestPatientUpdateValidation:
    def test_empty_update_has_no_changes(self):
        assert validate_patient_update({}).changes() == {}

    def test_only_supplied_fields_are_changes(self):
        update = validate_patient_update({"dose": "2 tablets", "visitDate": "2024-07-01"})
        assert update.changes() == {"dose": "2 tablets", "visit_date": "2024-07-01"}

    def test_supplied_fields_follow_creation_rules(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_update({"age": 0, "gender": "Unknown"})
        assert set(exc_info.value.fields) == {"age", "gender"}

    def test_required_fields_cannot_be_cleared(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_patient_update({"name": None, "age": None})
        assert exc_info.value.messages_for("name") == ["Patient name is required"]
        assert exc_info.value.messages_for("age") == ["Age is required"]

    def test_optional_field_can_be_cleared(self):
        update = validate_patient_update({"contactNumber": None, "fee": ""})
        assert update.changes() == {"contact_number": None, "fee": None}


class TestUserCreateValidation:
    def test_valid_user(self):
        user = validate_user_create({"username": "reception", "password": "s3cret"})
        assert user.username == "reception"
        assert user.password == "s3cret"

    def test_both_fields_required(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_user_create({"username": "", "password": None})
        assert exc_info.value.messages_for("username") == ["Username is required"]
        assert exc_info.value.messages_for("password") == ["Password is required"]

    def test_missing_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_user_create({})
        assert set(exc_info.value.fields) == {"username", "password"}
