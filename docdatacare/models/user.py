from sqlalchemy import Column, String, Text
from .base import Base, generate_uuid


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=generate_uuid)
    username = Column(Text, unique=True, nullable=False, index=True)
    password = Column(Text, nullable=False)  # bcrypt hash
