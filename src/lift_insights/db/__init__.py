"""Database layer for lift-insights."""

from .engine import get_data_dir, get_db_path, init_db, open_db
from .repositories import ClientRepository, TrainingLogRepository

__all__ = [
    "ClientRepository",
    "get_data_dir",
    "get_db_path",
    "init_db",
    "open_db",
    "TrainingLogRepository",
]
