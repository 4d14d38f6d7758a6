from pydantic import BaseModel, Field


class CreateReviewRequest(BaseModel):
    """Request schema for submitting a clinic review."""

    clinic_id: int
    user_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1, max_length=5000)
    is_anonymous: bool = False
