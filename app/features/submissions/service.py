# Submissions Feature - Service

from app.core.logging import logger
from app.database import DataStore
from app.features.clinics.models import Clinic, Contact, Tier
from app.features.submissions.models import ListingSubmission
from app.shared.exceptions import EntityNotFoundException


class SubmissionService:
    """Service class for patient-proposed clinic listings."""

    def __init__(self, store: DataStore):
        self.store = store

    async def submit_listing(
        self,
        clinic_name: str,
        clinic_city: str,
        clinic_address: str,
        clinic_phone: str,
        clinic_website: str,
        submitter_name: str,
        submitter_id: str,
        clinic_country: str = "",
    ) -> ListingSubmission:
        """Queue a new clinic proposal for admin review."""
        async with self.store.transaction("submit") as db:
            submission = ListingSubmission.build(
                id=db.next_id(),
                clinic_name=clinic_name,
                clinic_city=clinic_city,
                clinic_country=clinic_country,
                clinic_address=clinic_address,
                clinic_phone=clinic_phone,
                clinic_website=clinic_website,
                submitter_name=submitter_name,
                submitter_id=submitter_id,
            )
            db.pending_submissions = [submission, *db.pending_submissions]

            logger.info(f"Listing submission {submission.id} received from {submitter_id}")
            return submission.clone()

    async def approve_submission(self, submission_id: int) -> Clinic:
        """
        Turn a submission into a new, unverified Basic-tier clinic.

        Raises:
            EntityNotFoundException: submission is not pending
        """
        async with self.store.transaction("moderation") as db:
            index = db.index_of(db.pending_submissions, submission_id)
            if index == -1:
                raise EntityNotFoundException("submission", submission_id)
            submission = db.pending_submissions[index]

            clinic = Clinic.build(
                id=db.next_id(),
                name=submission.clinic_name,
                tier=Tier.BASIC,
                city=submission.clinic_city,
                country=submission.clinic_country,
                address=submission.clinic_address,
                contact=Contact(phone=submission.clinic_phone, website=submission.clinic_website),
                verified=False,
                owner_id=None,
            )
            db.clinics = [clinic, *db.clinics]
            db.pending_submissions = [s for s in db.pending_submissions if s.id != submission_id]

            logger.info(f"Approved submission {submission_id} as clinic {clinic.id}")
            return clinic.clone()

    async def deny_submission(self, submission_id: int) -> None:
        """Discard a pending submission. Unknown ids are ignored."""
        async with self.store.transaction("moderation") as db:
            db.pending_submissions = [s for s in db.pending_submissions if s.id != submission_id]
            logger.info(f"Denied submission {submission_id}")
