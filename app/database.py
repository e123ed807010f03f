"""
In-memory paste store.
Holds the ordered paste records and the id counter; nothing is persisted.
"""
import logging
import threading
from typing import Any, Dict, Iterable, List, Optional

from app.models import Paste, PasteCreate

logger = logging.getLogger(__name__)


class PasteStore:
    """Ordered collection of pastes plus a monotonic id counter."""

    def __init__(self, seed: Iterable[Dict[str, Any]] = ()):
        """
        Initialize the store from seed records.

        Args:
            seed: Initial paste records, each with an integer ``id``.
                  Records are copied, so the caller's data is never mutated.
        """
        self._pastes: List[Paste] = [Paste(**record) for record in seed]
        self._last_id: int = max((paste.id for paste in self._pastes), default=0)
        # Guards the counter increment together with the append
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        """Number of stored pastes."""
        return len(self._pastes)

    def list_pastes(self) -> List[Paste]:
        """Return all pastes in insertion order."""
        return self._pastes

    def get_paste(self, paste_id: float) -> Optional[Paste]:
        """
        Find a paste by id.

        Args:
            paste_id: Numeric paste identifier

        Returns:
            The stored paste or None if no paste has that id
        """
        for paste in self._pastes:
            if paste.id == paste_id:
                return paste
        return None

    def save_paste(self, draft: PasteCreate) -> Paste:
        """
        Store a new paste under the next id.

        Args:
            draft: Creation payload; only the fields the client sent are kept

        Returns:
            The stored paste
        """
        fields = draft.model_dump(exclude_unset=True)
        with self._lock:
            self._last_id += 1
            paste = Paste(id=self._last_id, **fields)
            self._pastes.append(paste)

        logger.info(f"Paste {paste.id} saved successfully")
        return paste
