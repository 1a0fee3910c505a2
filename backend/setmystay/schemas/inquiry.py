from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from setmystay.schemas.notification import Notification


class InquiryCreate(BaseModel):
    listing_id: str
    bed_id: str
    name: str = Field(min_length=1)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_date_order(self) -> InquiryCreate:
        if self.end_date < self.start_date:
            raise ValueError("End date must not be before start date")
        return self


class InquiryResponse(BaseModel):
    id: int
    listing_id: str
    bed_id: str
    name: str
    start_date: date
    end_date: date
    created_at: datetime

    model_config = {"from_attributes": True}


class InquiryCreatedResponse(BaseModel):
    inquiry: InquiryResponse
    notification: Notification
