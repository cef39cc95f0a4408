import logging

from ..core.config import Settings
from ..models.base import make_engine
from .base import Storage
from .database import DatabaseStorage
from .memory import MemoryStorage

logger = logging.getLogger(__name__)


def build_storage(config: Settings) -> Storage:
    """Construct the process-wide storage backend named by ``STORAGE_BACKEND``."""
    backend = config.STORAGE_BACKEND.lower()
    if backend == "memory":
        storage: Storage = MemoryStorage()
    elif backend == "database":
        storage = DatabaseStorage(make_engine(config.DATABASE_URL))
        if config.CREATE_TABLES_ON_STARTUP:
            storage.create_tables()
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {config.STORAGE_BACKEND!r}")
    logger.info("Using %s storage backend", storage.backend_name)
    return storage
