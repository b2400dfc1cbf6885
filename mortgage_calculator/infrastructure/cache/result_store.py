"""In-memory store for computed mortgage calculations"""

from typing import Dict, List

from mortgage_calculator.domain.models import LoanCalculation
from mortgage_calculator.infrastructure.cache.locks import ReadWriteLock


class InMemoryResultStore:
    """
    Thread-safe keyed store of calculations.

    Ids start at 1 and only ever grow. `store` takes the write side of the
    lock so counter increment and insert happen together; `get_all` and
    `len()` take the read side and may run in parallel with each other.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._calculations: Dict[int, LoanCalculation] = {}
        self._last_id = 0

    def store(self, calculation: LoanCalculation) -> int:
        """Assign the next id to the calculation, keep it, and return the id"""
        with self._lock.write():
            self._last_id += 1
            calculation.id = self._last_id
            self._calculations[calculation.id] = calculation
            return calculation.id

    def get_all(self) -> List[LoanCalculation]:
        """Snapshot of every stored calculation; order is not guaranteed"""
        with self._lock.read():
            return list(self._calculations.values())

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._calculations)
