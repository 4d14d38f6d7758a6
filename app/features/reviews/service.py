# Reviews Feature - Service

from app.core.logging import logger
from app.database import DataStore
from app.features.reviews.models import Review
from app.shared.exceptions import EntityNotFoundException
from app.shared.models import today


class ReviewService:
    """Service class for patient review moderation."""

    def __init__(self, store: DataStore):
        self.store = store

    async def submit_review(
        self,
        clinic_id: int,
        user_id: str,
        rating: int,
        comment: str,
        is_anonymous: bool = False,
    ) -> Review:
        """
        Queue a review for moderation.

        The review lands at the front of the pending queue; the clinic is not
        touched until an admin approves it.
        """
        async with self.store.transaction("submit") as db:
            review = Review.build(
                id=db.next_id(),
                user_id=user_id,
                clinic_id=clinic_id,
                rating=rating,
                comment=comment,
                date=today(),
                status="pending",
                is_anonymous=is_anonymous,
            )
            db.pending_reviews = [review, *db.pending_reviews]

            logger.info(f"Review {review.id} for clinic {clinic_id} submitted for moderation")
            return review.clone()

    async def approve_review(self, review_id: int) -> Review:
        """
        Move a pending review into its clinic's approved reviews.

        Raises:
            EntityNotFoundException: review is not in the pending queue
        """
        async with self.store.transaction("moderation") as db:
            index = db.index_of(db.pending_reviews, review_id)
            if index == -1:
                raise EntityNotFoundException("review", review_id)

            review = db.pending_reviews[index].clone()
            review.status = "approved"
            db.pending_reviews = [r for r in db.pending_reviews if r.id != review_id]

            clinic = db.find_clinic(review.clinic_id)
            if clinic:
                clinic.add_approved_review(review)
                logger.info(f"Approved review {review_id} for clinic {clinic.id}")
            else:
                logger.warning(
                    f"Approved review {review_id} references missing clinic {review.clinic_id}; "
                    "it was removed from the queue without being attached"
                )

            return review.clone()

    async def deny_review(self, review_id: int) -> None:
        """Discard a pending review. Unknown ids are ignored."""
        async with self.store.transaction("moderation") as db:
            db.pending_reviews = [r for r in db.pending_reviews if r.id != review_id]
            logger.info(f"Denied pending review {review_id}")
