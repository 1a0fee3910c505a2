from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from setmystay.config import settings
from setmystay.database import get_db
from setmystay.models import Listing, RoommateProfile

router = APIRouter()


@router.get("/health")
def health_check(db: Session = Depends(get_db)) -> dict:
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "llm_provider": settings.llm_provider,
        "listings": db.query(Listing).count(),
        "roommates": db.query(RoommateProfile).count(),
    }
