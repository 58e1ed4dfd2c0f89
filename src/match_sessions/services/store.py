"""Store interface and single-writer transaction wrapper."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Protocol

from match_sessions.domain.models import Snapshot


class Store(Protocol):
    """Persistence interface holding the sessions and attendances collections."""

    def load_all(self) -> Snapshot:
        """Return the current contents of both collections."""

    def save_all(self, snapshot: Snapshot) -> None:
        """Atomically replace both collections."""


@dataclass
class StoreTransaction:
    """Serializes read-modify-write cycles over the whole store snapshot."""

    store: Store
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def read(self) -> Snapshot:
        """Return a consistent snapshot for read-only use."""
        with self._lock:
            return self.store.load_all()

    @contextmanager
    def transaction(self) -> Iterator[Snapshot]:
        """Yield a working copy and save it if the block completes."""
        with self._lock:
            working = self.store.load_all().copy()
            yield working
            self.store.save_all(working)
