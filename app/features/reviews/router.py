# Reviews router
from fastapi import APIRouter, Depends, status

from app.database import DataStore, get_database
from app.features.reviews.models import Review
from app.features.reviews.schemas import CreateReviewRequest
from app.features.reviews.service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
async def submit_review(request: CreateReviewRequest, store: DataStore = Depends(get_database)):
    """
    Submit a review for moderation.

    - **clinic_id**: Reviewed clinic
    - **user_id**: Author
    - **rating**: 1 to 5
    - **comment**: Review text
    - **is_anonymous**: Hide the author's name when published
    """
    return await ReviewService(store).submit_review(
        request.clinic_id,
        request.user_id,
        request.rating,
        request.comment,
        request.is_anonymous,
    )


@router.post("/{review_id}/approve", response_model=Review)
async def approve_review(review_id: int, store: DataStore = Depends(get_database)):
    """Approve a pending review and publish it on its clinic."""
    return await ReviewService(store).approve_review(review_id)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deny_review(review_id: int, store: DataStore = Depends(get_database)):
    """Deny (discard) a pending review."""
    await ReviewService(store).deny_review(review_id)
