"""
Singleton pattern for single-instance classes.
"""
from typing import Any, Dict
import threading
from utils.logging_config import get_logger

logger = get_logger(__name__)


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.

    Reset (tests only):
        SingletonMeta.reset(MyClass)
    """
    _instances: Dict[type, Any] = {}
    _lock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        """Create or return existing instance."""
        if cls not in cls._instances:
            with cls._lock:
                # Double-checked locking
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.debug(f"Created singleton instance of {cls.__name__}")

        return cls._instances[cls]

    @classmethod
    def reset(mcs, cls: type):
        """Forget the cached instance of ``cls`` so the next access rebuilds it."""
        with mcs._lock:
            if mcs._instances.pop(cls, None) is not None:
                logger.debug(f"Reset singleton instance of {cls.__name__}")


class Singleton(metaclass=SingletonMeta):
    """Base class for singleton objects."""

    @classmethod
    def get_instance(cls):
        """Return the shared instance, creating it on first access."""
        return cls()


class Database(Singleton):
    """The one database connection shared by the whole process."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def write(self):
        """Write to the database."""
        self.logger.info("Writing database")


def get_database() -> Database:
    """Get the shared database instance."""
    return Database.get_instance()
