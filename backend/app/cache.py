# app/cache.py
import logging
import threading

log = logging.getLogger("uvicorn")

DASHBOARD_PATH = "/dashboard"

def workout_path(workout_id) -> str:
    return f"/dashboard/workout/{workout_id}"

class Revalidator:
    """Tracks rendered views that went stale after a mutation.

    Mutations call ``revalidate_path``; whatever renders those views calls
    ``clear`` once it has recomputed a path; ``consume`` drains everything.
    """
    def __init__(self):
        self._lock = threading.Lock()
        self._pending: set[str] = set()

    def revalidate_path(self, path: str) -> None:
        with self._lock:
            self._pending.add(path)
        log.debug("revalidate %s", path)

    def is_stale(self, path: str) -> bool:
        with self._lock:
            return path in self._pending

    def clear(self, path: str) -> bool:
        """Drop ``path`` once a reader has recomputed it; True if it was stale."""
        with self._lock:
            stale = path in self._pending
            self._pending.discard(path)
        if stale:
            log.debug("recomputed %s", path)
        return stale

    def consume(self) -> list[str]:
        with self._lock:
            paths = sorted(self._pending)
            self._pending.clear()
        return paths
