from __future__ import annotations

from enum import StrEnum
from typing import Literal, Union

from pydantic import BaseModel, PositiveInt

UNLIMITED = "unlimited"

UnlockPlan = Union[PositiveInt, Literal["unlimited"]]


class EntitlementState(BaseModel):
    count: int = 0
    is_unlimited: bool = False
    unlocked_ids: set[str] = set()


class ConsumeStatus(StrEnum):
    UNLOCKED = "unlocked"
    ALREADY_UNLOCKED = "already_unlocked"
    INSUFFICIENT_CREDITS = "insufficient_credits"


class ConsumeResult(BaseModel):
    item_id: str
    status: ConsumeStatus
    remaining: int
    is_unlimited: bool = False
    message: str | None = None

    @property
    def success(self) -> bool:
        return self.status is not ConsumeStatus.INSUFFICIENT_CREDITS


class GrantResult(BaseModel):
    plan: UnlockPlan
    title: str
    description: str


class EntitlementResponse(BaseModel):
    count: int
    is_unlimited: bool
    unlocked_ids: list[str]

    @classmethod
    def from_state(cls, state: EntitlementState) -> EntitlementResponse:
        return cls(
            count=state.count,
            is_unlimited=state.is_unlimited,
            unlocked_ids=sorted(state.unlocked_ids),
        )


class PurchaseRequest(BaseModel):
    plan: UnlockPlan


class PurchaseResponse(GrantResult):
    price: int
    state: EntitlementResponse


class UnlockResponse(ConsumeResult):
    state: EntitlementResponse
