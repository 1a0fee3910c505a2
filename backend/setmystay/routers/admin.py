from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from setmystay.database import get_db
from setmystay.dependencies import get_admin_store, require_admin
from setmystay.models.listing import ModerationStatus
from setmystay.schemas.admin import (
    AdminLogin,
    AdminSessionResponse,
    AnalyticsResponse,
    ModerationActionResponse,
    ModerationListResponse,
    StatusUpdate,
)
from setmystay.schemas.notification import Notification
from setmystay.schemas.pricing import PricingTable
from setmystay.services import admin_service, pricing_service
from setmystay.storage.base import KeyValueStore
from setmystay.utils.exceptions import AdminAuthError, ItemNotFoundError

router = APIRouter(prefix="/admin")


@router.post("/login", response_model=AdminSessionResponse)
def login(
    body: AdminLogin,
    store: KeyValueStore = Depends(get_admin_store),
) -> AdminSessionResponse:
    try:
        token = admin_service.login(store, body.password, body.pin, body.answer)
    except AdminAuthError as e:
        raise HTTPException(status_code=401, detail=str(e)) from e
    return AdminSessionResponse(
        token=token,
        notification=Notification(
            title="Authentication Successful!",
            description="Redirecting to dashboard...",
        ),
    )


@router.post("/logout")
def logout(
    token: str = Depends(require_admin),
    store: KeyValueStore = Depends(get_admin_store),
) -> dict:
    admin_service.logout(store, token)
    return {"message": "Logged out"}


@router.get("/pending", response_model=ModerationListResponse, dependencies=[Depends(require_admin)])
def get_pending(db: Session = Depends(get_db)) -> ModerationListResponse:
    items = admin_service.pending_items(db)
    return ModerationListResponse(items=items, total=len(items))


@router.get("/items", response_model=ModerationListResponse, dependencies=[Depends(require_admin)])
def get_all_items(db: Session = Depends(get_db)) -> ModerationListResponse:
    """Every property and roommate profile with its moderation status."""
    items = admin_service.all_items(db)
    return ModerationListResponse(items=items, total=len(items))


@router.post(
    "/items/{item_id}/status",
    response_model=ModerationActionResponse,
    dependencies=[Depends(require_admin)],
)
def update_status(
    item_id: str,
    body: StatusUpdate,
    db: Session = Depends(get_db),
) -> ModerationActionResponse:
    try:
        row = admin_service.update_status(db, item_id, ModerationStatus(body.status))
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return ModerationActionResponse(
        item_id=item_id,
        moderation_status=row.moderation_status,
        notification=Notification(
            title="Status Updated",
            description=f"Item {item_id} has been {row.moderation_status}.",
        ),
    )


@router.delete(
    "/items/{item_id}",
    response_model=ModerationActionResponse,
    dependencies=[Depends(require_admin)],
)
def delete_item(item_id: str, db: Session = Depends(get_db)) -> ModerationActionResponse:
    try:
        admin_service.delete_item(db, item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return ModerationActionResponse(
        item_id=item_id,
        moderation_status=None,
        notification=Notification(
            title="Item Deleted",
            description=f"Item {item_id} has been removed.",
            variant="destructive",
        ),
    )


@router.get("/pricing", response_model=PricingTable, dependencies=[Depends(require_admin)])
def get_pricing(store: KeyValueStore = Depends(get_admin_store)) -> PricingTable:
    return pricing_service.get_pricing(store)


@router.put("/pricing", response_model=PricingTable, dependencies=[Depends(require_admin)])
def update_pricing(
    body: PricingTable,
    store: KeyValueStore = Depends(get_admin_store),
) -> PricingTable:
    try:
        return pricing_service.update_pricing(store, body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.get("/analytics", response_model=AnalyticsResponse, dependencies=[Depends(require_admin)])
def get_analytics(db: Session = Depends(get_db)) -> AnalyticsResponse:
    return admin_service.analytics(db)
