from __future__ import annotations

import json
from datetime import datetime
from enum import StrEnum
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from setmystay.database import Base


class ModerationStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Listing(Base):
    """PG or rental listing, seeded from bundled data or submitted by a visitor."""

    __tablename__ = "listings"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    property_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    rent: Mapped[int] = mapped_column(Integer, nullable=False)
    area: Mapped[int] = mapped_column(Integer, default=0)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    locality: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), default="")
    complete_address: Mapped[str] = mapped_column(String(500), nullable=False)
    partial_address: Mapped[str] = mapped_column(String(255), nullable=False)
    owner_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    contact_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[str] = mapped_column(Text, default="")
    furnished_status: Mapped[str] = mapped_column(String(30), nullable=False)
    amenities: Mapped[str] = mapped_column(Text, default="[]")
    size: Mapped[str] = mapped_column(String(50), nullable=False)
    images: Mapped[str] = mapped_column(Text, default="[]")
    video_url: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    views: Mapped[int] = mapped_column(Integer, default=0)
    owner_id: Mapped[str] = mapped_column(String(64), nullable=False)
    broker_status: Mapped[str] = mapped_column(String(30), nullable=False)
    verification_document_url: Mapped[Optional[str]] = mapped_column(
        String(1000), nullable=True
    )
    beds: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    position: Mapped[int] = mapped_column(Integer, default=0, index=True)
    moderation_status: Mapped[str] = mapped_column(
        String(20), default=ModerationStatus.APPROVED.value
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=func.now())

    @property
    def amenities_list(self) -> list[str]:
        return json.loads(self.amenities) if self.amenities else []

    @property
    def images_list(self) -> list[str]:
        return json.loads(self.images) if self.images else []

    @property
    def beds_list(self) -> list[dict] | None:
        return json.loads(self.beds) if self.beds else None
