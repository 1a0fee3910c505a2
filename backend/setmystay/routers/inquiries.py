from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.orm import Session

from setmystay.database import get_db
from setmystay.schemas.inquiry import InquiryCreate, InquiryCreatedResponse
from setmystay.services import inquiry_service
from setmystay.utils.exceptions import BedUnavailableError, ItemNotFoundError

router = APIRouter(prefix="/inquiries")


@router.post("", response_model=InquiryCreatedResponse, status_code=201)
def create_inquiry(
    body: InquiryCreate,
    db: Session = Depends(get_db),
    x_visitor_id: str | None = Header(None),
) -> InquiryCreatedResponse:
    try:
        return inquiry_service.create_inquiry(db, body, visitor_id=x_visitor_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except BedUnavailableError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
