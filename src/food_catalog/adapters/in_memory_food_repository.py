"""In-memory implementation of the food repository."""

import threading

from food_catalog.domain.foods import FoodRecord
from food_catalog.services.foods import FoodRepository


class InMemoryFoodRepository(FoodRepository):
    """Process-lifetime food table keyed by id.

    One lock guards both the id counter and the table so ids are never handed
    out twice when requests are served from a thread pool.
    """

    def __init__(self) -> None:
        self._records: dict[int, FoodRecord] = {}
        self._current_id = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Reserve and return the next food id."""
        with self._lock:
            self._current_id += 1
            return self._current_id

    def insert(self, record: FoodRecord) -> FoodRecord:
        """Store a record under its id, replacing any previous value."""
        with self._lock:
            self._records[record.id] = record
        return record

    def get_all(self) -> list[FoodRecord]:
        """Return every record in insertion order."""
        with self._lock:
            return list(self._records.values())

    def get_by_id(self, food_id: int) -> FoodRecord | None:
        with self._lock:
            return self._records.get(food_id)

    def replace(self, food_id: int, record: FoodRecord) -> FoodRecord | None:
        """Overwrite the record at an id; no-op when the id is unknown."""
        with self._lock:
            if food_id not in self._records:
                return None
            self._records[food_id] = record
        return record

    def delete(self, food_id: int) -> bool:
        with self._lock:
            return self._records.pop(food_id, None) is not None

    def exists(self, food_id: int) -> bool:
        with self._lock:
            return food_id in self._records

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def reset(self) -> None:
        """Drop all records and restart ids at 1. Test isolation only."""
        with self._lock:
            self._records.clear()
            self._current_id = 0
