"""Inventory view endpoints."""

from fastapi import APIRouter

from catalog_admin.dependencies import Scheduler
from catalog_admin.schemas.product import InventoryResponse

router = APIRouter()


@router.get("", response_model=InventoryResponse)
async def get_inventory(scheduler: Scheduler) -> InventoryResponse:
    """
    Get the in-memory inventory view.

    Applies any reload queued by change notifications first, so the response
    reflects every write committed before the request.
    """
    scheduler.run_pending()
    if scheduler.view.loaded_at is None:
        scheduler.view.reload()
    return InventoryResponse.model_validate(scheduler.view.snapshot())


@router.post("/reload", response_model=InventoryResponse)
async def reload_inventory(scheduler: Scheduler) -> InventoryResponse:
    """Force a full reload of the inventory view."""
    scheduler.request_reload()
    scheduler.run_pending()
    return InventoryResponse.model_validate(scheduler.view.snapshot())
