from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from setmystay.database import get_db
from setmystay.dependencies import get_admin_store
from setmystay.schemas.pricing import PricingTable
from setmystay.schemas.submission import ListingSubmission, SubmissionResponse
from setmystay.services import pricing_service, submission_service
from setmystay.storage.base import KeyValueStore

router = APIRouter()


@router.post("/submissions", response_model=SubmissionResponse, status_code=201)
def submit_listing(
    body: ListingSubmission,
    db: Session = Depends(get_db),
    pricing_store: KeyValueStore = Depends(get_admin_store),
) -> SubmissionResponse:
    return submission_service.submit_listing(db, pricing_store, body)


@router.get("/pricing", response_model=PricingTable)
def get_pricing(
    pricing_store: KeyValueStore = Depends(get_admin_store),
) -> PricingTable:
    return pricing_service.get_pricing(pricing_store)
