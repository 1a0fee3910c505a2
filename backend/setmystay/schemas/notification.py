from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class Notification(BaseModel):
    """Short message for the client to show as a toast."""

    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"
