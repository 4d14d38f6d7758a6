# Claims router
from fastapi import APIRouter, Depends, status

from app.database import DataStore, get_database
from app.features.claims.models import ClaimRequest
from app.features.claims.schemas import ClaimApprovalResponse, CreateClaimRequest
from app.features.claims.service import ClaimService

router = APIRouter(prefix="/claims", tags=["Claims"])


@router.post("", response_model=ClaimRequest, status_code=status.HTTP_201_CREATED)
async def submit_claim(request: CreateClaimRequest, store: DataStore = Depends(get_database)):
    """
    Submit a claim to take ownership of a clinic listing.

    - **verification_method**: `email` or `document`
    - **document_proof**: Required for `document` verification
    """
    return await ClaimService(store).submit_claim(
        clinic_id=request.clinic_id,
        clinic_name=request.clinic_name,
        submitter_name=request.submitter_name,
        submitter_title=request.submitter_title,
        submitter_email=request.submitter_email,
        verification_method=request.verification_method,
        document_proof=request.document_proof,
    )


@router.post("/{claim_id}/approve", response_model=ClaimApprovalResponse)
async def approve_claim(claim_id: int, store: DataStore = Depends(get_database)):
    """Approve a claim: the submitter becomes the clinic's verified owner."""
    clinic, user = await ClaimService(store).approve_claim(claim_id)
    return ClaimApprovalResponse(clinic=clinic, user=user)


@router.delete("/{claim_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deny_claim(claim_id: int, store: DataStore = Depends(get_database)):
    """Deny (discard) a pending claim."""
    await ClaimService(store).deny_claim(claim_id)
