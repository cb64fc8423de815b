# app/store.py
from __future__ import annotations
import threading
from typing import Callable, Dict

from app.config import settings
from app.errors import IdentifierCollisionError, ReceiptNotFoundError
from app.utils.ids import generate_receipt_id
from app.utils.logging import logger

class ScoreStore:
    """
    In-memory map of receipt id -> points, safe to share between request threads.

    Records go absent -> present exactly once and are never changed or removed.
    Every read and write goes through one lock; nothing inside the lock does I/O.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = generate_receipt_id,
        max_attempts: int | None = None,
    ):
        self._id_factory = id_factory
        self._max_attempts = settings.ID_MAX_ATTEMPTS if max_attempts is None else max_attempts
        if self._max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self._max_attempts!r}")
        self._lock = threading.Lock()
        self._points: Dict[str, int] = {}

    def put(self, points: int) -> str:
        if isinstance(points, bool) or not isinstance(points, int) or points < 0:
            raise ValueError(f"points must be a non-negative int, got {points!r}")

        for attempt in range(1, self._max_attempts + 1):
            receipt_id = self._id_factory()
            with self._lock:
                if receipt_id not in self._points:
                    self._points[receipt_id] = points
                    return receipt_id
            logger.warning("Receipt id collision on attempt %s/%s, generating a new id",
                           attempt, self._max_attempts)
        raise IdentifierCollisionError(self._max_attempts)

    def get(self, receipt_id: str) -> int:
        with self._lock:
            points = self._points.get(receipt_id)
        if points is None:
            raise ReceiptNotFoundError(receipt_id)
        return points

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

# process-wide instance served to the routes
_store = ScoreStore()

def get_store() -> ScoreStore:
    return _store
