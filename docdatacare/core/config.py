from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    APP_NAME: str = "DocDataCare Patient Records"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # "memory" keeps records for the process lifetime, "database" persists them
    STORAGE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite:///./docdatacare.db"
    CREATE_TABLES_ON_STARTUP: bool = True  # Use Alembic migrations in production

    SEED_DEMO_DATA: bool = False

    # bcrypt work factor for stored user passwords
    BCRYPT_ROUNDS: int = 12

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
