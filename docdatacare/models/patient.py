from sqlalchemy import Column, String, Integer, Text, Numeric
from .base import Base, generate_uuid


class Patient(Base):
    __tablename__ = "patients"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(Text, nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(Text, nullable=False)  # Male, Female, Other
    contact_number = Column(Text, nullable=True)

    # Dates are kept as entered (plain text), parsed only for ordering
    visit_date = Column(Text, nullable=True)
    followup_date = Column(Text, nullable=True)

    disease_symptoms = Column(Text, nullable=False)
    prescription_treatment = Column(Text, nullable=True)
    dose = Column(Text, nullable=True)
    fee = Column(Numeric(10, 2), nullable=True)
