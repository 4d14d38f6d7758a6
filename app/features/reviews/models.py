from typing import Literal

from pydantic import Field

from app.shared.models import StoreModel


class Review(StoreModel):
    """Patient review of a clinic."""

    id: int
    user_id: str
    clinic_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: str
    date: str
    status: Literal["pending", "approved"] = "pending"
    is_anonymous: bool = False
