from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from setmystay.database import get_db
from setmystay.dependencies import get_admin_store, get_tracker
from setmystay.schemas.entitlement import (
    EntitlementResponse,
    PurchaseRequest,
    PurchaseResponse,
    UnlockResponse,
)
from setmystay.services import catalog_service, pricing_service
from setmystay.services.entitlement_service import EntitlementTracker
from setmystay.storage.base import KeyValueStore
from setmystay.utils.exceptions import ItemNotFoundError

router = APIRouter(prefix="/entitlements")


@router.get("", response_model=EntitlementResponse)
def get_entitlements(
    tracker: EntitlementTracker = Depends(get_tracker),
) -> EntitlementResponse:
    return EntitlementResponse.from_state(tracker.state)


@router.post("/purchase", response_model=PurchaseResponse)
def purchase_plan(
    body: PurchaseRequest,
    tracker: EntitlementTracker = Depends(get_tracker),
    pricing_store: KeyValueStore = Depends(get_admin_store),
) -> PurchaseResponse:
    """Simulated purchase of an unlock pack or the unlimited plan."""
    try:
        price = pricing_service.unlock_price(
            pricing_service.get_pricing(pricing_store), body.plan
        )
        grant = tracker.grant(body.plan)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return PurchaseResponse(
        **grant.model_dump(),
        price=price,
        state=EntitlementResponse.from_state(tracker.state),
    )


@router.post("/unlock/{item_id}", response_model=UnlockResponse)
def unlock_item(
    item_id: str,
    db: Session = Depends(get_db),
    tracker: EntitlementTracker = Depends(get_tracker),
) -> UnlockResponse:
    """Spend an unlock. A status of ``insufficient_credits`` means "offer a plan"."""
    try:
        item = catalog_service.get_item(db, item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    result = tracker.consume(item.id)
    return UnlockResponse(
        **result.model_dump(),
        state=EntitlementResponse.from_state(tracker.state),
    )
