"""
Memoized static reference snapshot.

The snapshot is fetched at most once per client. Concurrent callers that
arrive while it is being fetched wait for that fetch instead of issuing
their own, and all of them observe the same snapshot.
"""

import logging
import threading
from typing import Optional

from .http import FplHTTP
from .models.bootstrap import BootstrapStatic

logger = logging.getLogger(__name__)

BOOTSTRAP_STATIC_PATH = "bootstrap-static/"


class SnapshotCache:
    """
    Holds zero or one BootstrapStatic for a single client.

    Pattern:
    - Populated snapshot: returned straight away, no lock taken
    - Empty slot: the first caller fetches while holding the lock
    - Callers blocked on the lock re-check the slot and reuse the result
    - A failed fetch leaves the slot empty so the next caller tries again
    """

    def __init__(self, http_client: FplHTTP):
        self.http = http_client
        self._snapshot: Optional[BootstrapStatic] = None
        self._lock = threading.Lock()
        self._fetch_count = 0

    @property
    def is_populated(self) -> bool:
        """Whether the snapshot has been fetched."""
        return self._snapshot is not None

    @property
    def fetch_count(self) -> int:
        """Number of static dataset fetches attempted by this cache."""
        return self._fetch_count

    def get(self) -> BootstrapStatic:
        """
        Return the snapshot, fetching it on first use.

        Raises:
            FplError: the fetch failed; the slot stays empty
        """
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        with self._lock:
            if self._snapshot is not None:
                logger.debug("Reusing snapshot populated by a concurrent caller")
                return self._snapshot

            self._fetch_count += 1
            logger.debug("Fetching static reference snapshot")
            snapshot = self.http.fetch(BOOTSTRAP_STATIC_PATH, BootstrapStatic)
            self._snapshot = snapshot
            logger.debug(
                "Snapshot populated: %d gameweeks, %d teams, %d players",
                len(snapshot.events),
                len(snapshot.teams),
                len(snapshot.elements),
            )
            return snapshot
