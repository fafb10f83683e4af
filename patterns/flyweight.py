"""
Flyweight pattern: one shared instance per key.
"""
import threading
from typing import Any, Callable, Dict, List
from utils.logging_config import get_logger
from utils.exceptions import ValidationError

logger = get_logger(__name__)


class FlyweightFactory:
    """
    Pool that hands out one shared instance per string key.

    Keys compare by exact, case-sensitive string equality. Lookup and
    insertion happen under one lock, so concurrent misses on the same key
    construct a single instance.

    Args:
        factory: Callable building the instance for a key on first request
    """

    def __init__(self, factory: Callable[[str], Any]):
        self.factory = factory
        self._pool: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Any:
        """Return the shared instance for ``key``, creating it on first use."""
        if not isinstance(key, str):
            raise ValidationError(
                f"Flyweight keys must be str, got {type(key).__name__}",
                details={'actual_type': type(key).__name__}
            )

        with self._lock:
            if key in self._pool:
                self.hits += 1
                return self._pool[key]

            instance = self.factory(key)
            self._pool[key] = instance
            self.misses += 1

        logger.debug(f"Created flyweight for '{key}'")
        return instance

    get_by_key = get

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._pool

    def __len__(self) -> int:
        with self._lock:
            return len(self._pool)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._pool)

    def clear(self):
        """Drop every shared instance and reset the counters."""
        with self._lock:
            self._pool.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> dict:
        """Get pool statistics."""
        with self._lock:
            hits, misses, size = self.hits, self.misses, len(self._pool)

        total = hits + misses
        hit_rate = hits / total if total > 0 else 0.0
        return {
            'hits': hits,
            'misses': misses,
            'hit_rate': hit_rate,
            'size': size
        }


class CarModel:
    """Intrinsic state shared by every car of one make."""

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def describe(self, color: str, plate: str) -> str:
        """Describe one car of this make; color and plate belong to the car."""
        return f"{color} {self._name} [{plate}]"

    def __repr__(self):
        return f"CarModel({self._name!r})"


car_models = FlyweightFactory(CarModel)


def get_car_model(key: str) -> CarModel:
    """Get the shared CarModel for a make such as 'BMW' or 'Audi'."""
    return car_models.get(key)
