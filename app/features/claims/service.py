# Claims Feature - Service

from typing import Optional, Tuple

from app.core.logging import logger
from app.core.security import generate_user_id
from app.database import DataStore
from app.features.auth.models import User
from app.features.claims.models import ClaimRequest, DocumentVerification, EmailVerification
from app.features.clinics.models import Clinic, Tier
from app.shared.exceptions import EntityNotFoundException


class ClaimService:
    """Service class for clinic ownership claims."""

    def __init__(self, store: DataStore):
        self.store = store

    async def submit_claim(
        self,
        clinic_id: int,
        clinic_name: str,
        submitter_name: str,
        submitter_title: str,
        submitter_email: str,
        verification_method: str = "email",
        document_proof: Optional[str] = None,
    ) -> ClaimRequest:
        """Queue a claim for admin review."""
        if verification_method == "document":
            verification = DocumentVerification.build(document_proof=document_proof or "")
        else:
            verification = EmailVerification.build(method=verification_method)

        async with self.store.transaction("submit") as db:
            claim = ClaimRequest.build(
                id=db.next_id(),
                clinic_id=clinic_id,
                clinic_name=clinic_name,
                submitter_name=submitter_name,
                submitter_title=submitter_title,
                submitter_email=submitter_email,
                verification=verification,
            )
            db.pending_claims = [claim, *db.pending_claims]

            logger.info(f"Claim {claim.id} submitted for clinic {clinic_id} by {submitter_email}")
            return claim.clone()

    async def approve_claim(self, claim_id: int) -> Tuple[Clinic, User]:
        """
        Hand a clinic over to the claim's submitter.

        Resolves the submitter by email, creating a clinic-owner account or
        promoting the existing user in place, then marks the clinic verified,
        owned and back on the Basic tier. All or nothing: a failure at any
        step leaves users, clinics and the queue untouched.

        Returns:
            tuple: (clinic, user)

        Raises:
            EntityNotFoundException: claim or claimed clinic is missing
        """
        async with self.store.transaction("claim_approval") as db:
            index = db.index_of(db.pending_claims, claim_id)
            if index == -1:
                raise EntityNotFoundException("claim", claim_id)
            claim = db.pending_claims[index]

            clinic = db.find_clinic(claim.clinic_id)
            if not clinic:
                raise EntityNotFoundException("clinic", claim.clinic_id)

            user = db.find_user_by_email(claim.submitter_email)
            if user:
                user.role = "clinic-owner"
            else:
                user = User.build(
                    id=generate_user_id(),
                    name=claim.submitter_name,
                    email=claim.submitter_email,
                    role="clinic-owner",
                )
                db.users = [*db.users, user]

            clinic.verified = True
            clinic.owner_id = user.id
            clinic.tier = Tier.BASIC

            db.pending_claims = [c for c in db.pending_claims if c.id != claim_id]

            logger.info(f"Approved claim {claim_id}: user {user.id} now owns clinic {clinic.id}")
            return clinic.clone(), user.clone()

    async def deny_claim(self, claim_id: int) -> None:
        """Discard a pending claim. Unknown ids are ignored."""
        async with self.store.transaction("moderation") as db:
            db.pending_claims = [c for c in db.pending_claims if c.id != claim_id]
            logger.info(f"Denied claim {claim_id}")
