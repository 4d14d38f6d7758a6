# Submissions router
from fastapi import APIRouter, Depends, status

from app.database import DataStore, get_database
from app.features.clinics.models import Clinic
from app.features.submissions.models import ListingSubmission
from app.features.submissions.schemas import CreateSubmissionRequest
from app.features.submissions.service import SubmissionService

router = APIRouter(prefix="/submissions", tags=["Submissions"])


@router.post("", response_model=ListingSubmission, status_code=status.HTTP_201_CREATED)
async def submit_listing(request: CreateSubmissionRequest, store: DataStore = Depends(get_database)):
    """Propose a new clinic for the directory."""
    return await SubmissionService(store).submit_listing(**request.model_dump())


@router.post("/{submission_id}/approve", response_model=Clinic)
async def approve_submission(submission_id: int, store: DataStore = Depends(get_database)):
    """Approve a submission, creating the clinic listing."""
    return await SubmissionService(store).approve_submission(submission_id)


@router.delete("/{submission_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deny_submission(submission_id: int, store: DataStore = Depends(get_database)):
    """Deny (discard) a pending submission."""
    await SubmissionService(store).deny_submission(submission_id)
