from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from setmystay.database import Base
from setmystay.models.listing import ModerationStatus


class RoommateProfile(Base):
    __tablename__ = "roommate_profiles"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    owner_name: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    rent: Mapped[int] = mapped_column(Integer, nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    locality: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), default="")
    complete_address: Mapped[str] = mapped_column(String(500), nullable=False)
    partial_address: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    contact_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[str] = mapped_column(Text, default="")
    preferences: Mapped[str] = mapped_column(Text, default="[]")
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    images: Mapped[str] = mapped_column(Text, default="[]")
    views: Mapped[int] = mapped_column(Integer, default=0)
    owner_id: Mapped[str] = mapped_column(String(64), nullable=False)
    verification_document_url: Mapped[Optional[str]] = mapped_column(
        String(1000), nullable=True
    )
    has_property: Mapped[bool] = mapped_column(Boolean, default=False)

    position: Mapped[int] = mapped_column(Integer, default=0, index=True)
    moderation_status: Mapped[str] = mapped_column(
        String(20), default=ModerationStatus.APPROVED.value
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=func.now())

    @property
    def property_type(self) -> str:
        return "Roommate"

    @property
    def preferences_list(self) -> list[str]:
        return json.loads(self.preferences) if self.preferences else []

    @property
    def images_list(self) -> list[str]:
        return json.loads(self.images) if self.images else []
