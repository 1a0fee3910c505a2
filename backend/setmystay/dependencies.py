from __future__ import annotations

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from setmystay.database import get_db
from setmystay.services import admin_service
from setmystay.services.entitlement_service import EntitlementTracker, load_tracker
from setmystay.storage.base import KeyValueStore
from setmystay.storage.memory import InMemoryStore
from setmystay.storage.sql import ADMIN_NAMESPACE, SqlKeyValueStore, visitor_namespace
from setmystay.utils.exceptions import AdminAuthError


def get_visitor_id(
    x_visitor_id: str = Header(..., min_length=1, max_length=200),
) -> str:
    return x_visitor_id


def get_visitor_store(
    visitor_id: str = Depends(get_visitor_id),
    db: Session = Depends(get_db),
) -> KeyValueStore:
    return SqlKeyValueStore(db, visitor_namespace(visitor_id))


def get_optional_visitor_store(
    x_visitor_id: str | None = Header(None, max_length=200),
    db: Session = Depends(get_db),
) -> KeyValueStore:
    """Visitor store when the header is sent, otherwise an empty scratch store."""
    if not x_visitor_id:
        return InMemoryStore()
    return SqlKeyValueStore(db, visitor_namespace(x_visitor_id))


def get_tracker(store: KeyValueStore = Depends(get_visitor_store)) -> EntitlementTracker:
    return load_tracker(store)


def get_admin_store(db: Session = Depends(get_db)) -> KeyValueStore:
    return SqlKeyValueStore(db, ADMIN_NAMESPACE)


def require_admin(
    x_admin_token: str | None = Header(None),
    store: KeyValueStore = Depends(get_admin_store),
) -> str:
    try:
        admin_service.require_session(store, x_admin_token)
    except AdminAuthError as e:
        raise HTTPException(status_code=401, detail=str(e)) from e
    return x_admin_token
