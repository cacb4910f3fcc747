"""In-memory inventory listings refreshed on catalog changes."""

from datetime import datetime, timezone
from threading import Event, Lock, Thread
from typing import Any, Callable, Dict, List, Optional

from catalog_admin.exceptions import PersistenceError
from catalog_admin.models.enums import CatalogTable, ChangeEventType
from catalog_admin.services.change_feed import ChangeEvent, ChangeFeed
from catalog_admin.services.repository import (
    BrandRepository,
    ProductRepository,
    ProductTypeRepository,
)
from catalog_admin.utils.logger import logger

_ROW_LABELS = {
    CatalogTable.PRODUCTS: "Product",
    CatalogTable.BRANDS: "Brand",
    CatalogTable.TYPES: "Type",
}


def notification_message(event: ChangeEvent) -> Dict[str, str]:
    """Build the title and description shown for a change event."""
    label = _ROW_LABELS[event.table]
    noun = label.lower()
    if event.event_type == ChangeEventType.INSERT:
        return {
            "title": f"{label} Added",
            "description": f"A new {noun} has been added to inventory",
        }
    if event.event_type == ChangeEventType.DELETE:
        return {
            "title": f"{label} Deleted",
            "description": f"A {noun} has been removed from inventory",
        }
    return {
        "title": f"{label} Updated",
        "description": f"A {noun} has been updated in inventory",
    }


class InventoryView:
    """
    Snapshot of products, brands and types as plain dictionaries.

    ``reload()`` replaces the whole snapshot, so running it again with no
    intervening change gives the same result.
    """

    def __init__(
        self,
        session_factory: Callable[[], Any],
        products: Optional[ProductRepository] = None,
        brands: Optional[BrandRepository] = None,
        types: Optional[ProductTypeRepository] = None,
    ):
        self.session_factory = session_factory
        self.products_repo = products or ProductRepository()
        self.brands_repo = brands or BrandRepository()
        self.types_repo = types or ProductTypeRepository()

        self.products: List[Dict[str, Any]] = []
        self.brands: List[Dict[str, Any]] = []
        self.product_types: List[Dict[str, Any]] = []
        self.loaded_at: Optional[datetime] = None
        self.reload_count = 0
        self.last_event: Optional[ChangeEvent] = None
        self._lock = Lock()

    def reload(self) -> None:
        """
        Fetch all three listings and swap them in.

        If the type listing fails, types are derived from the distinct type
        names on products (numbered from 1) so the view stays usable.

        Raises:
            PersistenceError: If products or brands cannot be read
        """
        db = self.session_factory()
        try:
            products = [row.to_dict() for row in self.products_repo.list_all(db)]
            brands = [row.to_dict() for row in self.brands_repo.list_all(db)]
            try:
                product_types = [row.to_dict() for row in self.types_repo.list_all(db)]
            except PersistenceError as e:
                logger.warning(f"Type listing unavailable, deriving from products: {e}")
                db.rollback()
                product_types = self.derive_types(products)
        except PersistenceError as e:
            logger.error(f"Error fetching inventory data: {e}")
            raise
        finally:
            db.close()

        with self._lock:
            self.products = products
            self.brands = brands
            self.product_types = product_types
            self.loaded_at = datetime.now(timezone.utc)
            self.reload_count += 1

        logger.debug(
            f"Inventory reloaded: {len(products)} products, {len(brands)} brands, "
            f"{len(product_types)} types"
        )

    @staticmethod
    def derive_types(products: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Number the distinct type names of products in order of first use."""
        seen: List[str] = []
        for product in products:
            type_name = product.get("type_name")
            if type_name and type_name not in seen:
                seen.append(type_name)
        return [{"id": index, "name": name} for index, name in enumerate(seen, start=1)]

    def snapshot(self) -> Dict[str, Any]:
        """Get the current listings with counts and the last notification."""
        with self._lock:
            return {
                "products": list(self.products),
                "brands": list(self.brands),
                "product_types": list(self.product_types),
                "total_products": len(self.products),
                "total_quantity": sum(p.get("quantity") or 0 for p in self.products),
                "loaded_at": self.loaded_at,
                "last_notification": (
                    notification_message(self.last_event) if self.last_event else None
                ),
            }


class ReloadScheduler:
    """
    Turn change notifications into inventory reloads.

    Every event requests a reload; requests that arrive while one is already
    pending collapse into it. Pending reloads run either on the caller's
    thread through ``run_pending()`` or on a background worker started with
    ``start()``. Reloads never overlap.
    """

    def __init__(self, view: InventoryView, poll_interval: float = 0.5):
        self.view = view
        self.poll_interval = poll_interval
        self._pending = False
        self._pending_lock = Lock()
        self._run_lock = Lock()
        self._wakeup = Event()
        self._stopping = Event()
        self._worker: Optional[Thread] = None
        self._unsubscribe: Optional[Callable[[], None]] = None
        self.requested = 0
        self.collapsed = 0

    def attach(self, feed: ChangeFeed) -> None:
        """Subscribe to every table of a change feed."""
        self.detach()
        self._unsubscribe = feed.subscribe(self.on_change)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_change(self, event: ChangeEvent) -> None:
        """Change feed callback."""
        self.view.last_event = event
        self.request_reload()

    @property
    def pending(self) -> bool:
        with self._pending_lock:
            return self._pending

    def request_reload(self) -> bool:
        """
        Queue a reload.

        Returns:
            True if a new reload was queued, False if one was already pending
        """
        with self._pending_lock:
            self.requested += 1
            if self._pending:
                self.collapsed += 1
                return False
            self._pending = True
        self._wakeup.set()
        return True

    def run_pending(self) -> bool:
        """
        Run the pending reload, if any, on the current thread.

        Returns:
            True if a reload ran
        """
        with self._run_lock:
            with self._pending_lock:
                if not self._pending:
                    return False
                self._pending = False
            try:
                self.view.reload()
            except PersistenceError as e:
                logger.error(f"Inventory reload failed: {e}")
                return False
            return True

    def start(self) -> None:
        """Start the background reload worker."""
        if self._worker and self._worker.is_alive():
            logger.warning("Reload worker already running")
            return

        self._stopping.clear()
        self._worker = Thread(target=self._work, name="inventory-reload", daemon=True)
        self._worker.start()
        logger.info("Started inventory reload worker")

    def stop(self, timeout: float = 5.0) -> None:
        """Stop the background reload worker."""
        if self._worker and self._worker.is_alive():
            self._stopping.set()
            self._wakeup.set()
            self._worker.join(timeout)
            logger.info("Stopped inventory reload worker")
        self._worker = None

    @property
    def running(self) -> bool:
        return bool(self._worker and self._worker.is_alive())

    def _work(self) -> None:
        while not self._stopping.is_set():
            self._wakeup.wait(self.poll_interval)
            self._wakeup.clear()
            if self._stopping.is_set():
                break
            self.run_pending()
