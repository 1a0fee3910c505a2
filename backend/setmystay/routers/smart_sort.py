from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from setmystay.database import get_db
from setmystay.dependencies import get_visitor_id, get_visitor_store
from setmystay.llm.base import LLMProvider
from setmystay.llm.factory import get_llm_provider
from setmystay.schemas.catalog import ListingCategory
from setmystay.schemas.smart_sort import SmartSortRequest, SmartSortResponse
from setmystay.services import smart_sort_service
from setmystay.storage.base import KeyValueStore

router = APIRouter(prefix="/smart-sort")


@router.post("/{category}", response_model=SmartSortResponse)
async def smart_sort(
    category: ListingCategory,
    body: SmartSortRequest,
    visitor_id: str = Depends(get_visitor_id),
    db: Session = Depends(get_db),
    store: KeyValueStore = Depends(get_visitor_store),
    llm: LLMProvider = Depends(get_llm_provider),
) -> SmartSortResponse:
    return await smart_sort_service.smart_sort(
        db,
        store,
        llm,
        category,
        body.filters,
        body.user_preferences,
        body.viewing_patterns,
        guard_key=visitor_id,
    )
