# Clinic Directory Feature - Service

from typing import List

from app.core.logging import logger
from app.database import DataStore
from app.features.clinics.models import Clinic, media_capability
from app.features.clinics.schemas import ClinicDraft
from app.features.files.service import FileService
from app.shared.exceptions import EntityNotFoundException


class ClinicService:
    """Service class for clinic listings."""

    def __init__(self, store: DataStore):
        self.store = store
        self.files = FileService(store)

    async def list_clinics(self) -> List[Clinic]:
        async with self.store.transaction("read") as db:
            return [c.clone() for c in db.clinics]

    async def get_clinic(self, clinic_id: int) -> Clinic:
        async with self.store.transaction("read") as db:
            clinic = db.find_clinic(clinic_id)
            if not clinic:
                raise EntityNotFoundException("clinic", clinic_id)
            return clinic.clone()

    async def _upload_media(self, draft: ClinicDraft) -> None:
        """Replace local image data on ``draft`` with uploaded URLs."""
        draft.image_url = await self.files.resolve_image(draft.image_url)
        draft.gallery_images = [
            await self.files.resolve_image(image)
            for image in draft.gallery_images
            if image
        ]

    @staticmethod
    def _apply_media_capability(draft: ClinicDraft) -> None:
        """Trim gallery and video to what the clinic's tier allows."""
        capability = media_capability(draft.tier)

        limit = capability.max_gallery_images
        if draft.gallery_images and not capability.allows_gallery():
            logger.warning(
                f"Clinic '{draft.name}': gallery dropped for tier {draft.tier.value}"
            )
            draft.gallery_images = []
        elif limit is not None and len(draft.gallery_images) > limit:
            logger.warning(
                f"Clinic '{draft.name}': gallery trimmed from {len(draft.gallery_images)} "
                f"to {limit} images for tier {draft.tier.value}"
            )
            draft.gallery_images = draft.gallery_images[:limit]

        if draft.video_url and not capability.video_allowed:
            logger.warning(f"Clinic '{draft.name}': video dropped for tier {draft.tier.value}")
            draft.video_url = None

    async def save_clinic(self, clinic: ClinicDraft) -> Clinic:
        """
        Create or update a clinic.

        An existing id is replaced in place; otherwise the clinic gets a new
        id and goes to the front of the list. Reviews and the rating derived
        from them change only through moderation, and the billing reference
        and subscription status only through checkout, so an update keeps
        the stored values of those fields.
        """
        async with self.store.transaction("save") as db:
            draft = clinic.clone()
            await self._upload_media(draft)
            self._apply_media_capability(draft)

            index = db.index_of(db.clinics, draft.id) if draft.id is not None else -1
            data = draft.model_dump()

            if index > -1:
                stored = db.clinics[index]
                data.update(
                    reviews=[r.clone() for r in stored.reviews],
                    rating=stored.rating,
                    review_count=stored.review_count,
                    billing_customer_id=stored.billing_customer_id,
                    subscription_status=stored.subscription_status,
                )
                saved = Clinic.build(**data)
                db.clinics = [*db.clinics[:index], saved, *db.clinics[index + 1:]]
                logger.info(f"Updated clinic {saved.id}")
            else:
                data.update(
                    id=db.next_id(),
                    reviews=[],
                    rating=0.0,
                    review_count=0,
                    billing_customer_id=None,
                    subscription_status=None,
                )
                saved = Clinic.build(**data)
                db.clinics = [saved, *db.clinics]
                logger.info(f"Created clinic {saved.id}")

            return saved.clone()
