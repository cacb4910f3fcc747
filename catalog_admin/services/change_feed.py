"""In-process change notifications for catalog tables."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Tuple

from catalog_admin.models.enums import CatalogTable, ChangeEventType
from catalog_admin.utils.logger import logger


@dataclass(frozen=True)
class ChangeEvent:
    """A committed row change on one catalog table."""

    event_type: ChangeEventType
    table: CatalogTable
    payload: Dict[str, Any] = field(default_factory=dict)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


Subscriber = Callable[[ChangeEvent], None]


class ChangeFeed:
    """
    Publish/subscribe hub for catalog change events.

    Repositories publish after every committed write; listeners such as the
    reload scheduler subscribe either to one table or to all of them.
    A failing subscriber is logged and skipped so the others still receive
    the event.
    """

    def __init__(self):
        self._subscribers: List[Tuple[Optional[CatalogTable], Subscriber]] = []
        self._lock = Lock()

    def subscribe(
        self, callback: Subscriber, table: Optional[CatalogTable] = None
    ) -> Callable[[], None]:
        """
        Register a callback.

        Args:
            callback: Called with each matching ChangeEvent
            table: Only deliver events for this table (all tables if None)

        Returns:
            A callable that removes the subscription
        """
        entry = (table, callback)
        with self._lock:
            self._subscribers.append(entry)

        def unsubscribe() -> None:
            with self._lock:
                if entry in self._subscribers:
                    self._subscribers.remove(entry)

        return unsubscribe

    def publish(self, event: ChangeEvent) -> None:
        """Deliver an event to every matching subscriber."""
        with self._lock:
            targets = [cb for table, cb in self._subscribers if table is None or table == event.table]

        logger.debug(
            f"Change received on {event.table.value}: {event.event_type.value} "
            f"({len(targets)} subscriber(s))"
        )
        for callback in targets:
            try:
                callback(event)
            except Exception as e:
                logger.error(f"Change subscriber {callback!r} failed: {e}")

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)


# Process-wide feed shared by the API and the CLI
change_feed = ChangeFeed()
