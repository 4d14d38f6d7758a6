# Clinic router
from typing import List

from fastapi import APIRouter, Depends, status

from app.database import DataStore, get_database
from app.features.clinics.models import Clinic, MediaCapability, media_capability
from app.features.clinics.schemas import ClinicDraft
from app.features.clinics.service import ClinicService
from app.features.subscriptions.schemas import SubscriptionRequest
from app.features.subscriptions.service import SubscriptionService

router = APIRouter(prefix="/clinics", tags=["Clinics"])


@router.get("", response_model=List[Clinic])
async def list_clinics(store: DataStore = Depends(get_database)):
    """List every clinic in the directory."""
    return await ClinicService(store).list_clinics()


@router.post("", response_model=Clinic, status_code=status.HTTP_201_CREATED)
async def create_clinic(clinic: ClinicDraft, store: DataStore = Depends(get_database)):
    """
    Create a clinic listing.

    Image fields may be base64 data URLs; they are uploaded first.
    """
    clinic.id = None
    return await ClinicService(store).save_clinic(clinic)


@router.get("/{clinic_id}", response_model=Clinic)
async def get_clinic(clinic_id: int, store: DataStore = Depends(get_database)):
    """Get one clinic with its approved reviews."""
    return await ClinicService(store).get_clinic(clinic_id)


@router.put("/{clinic_id}", response_model=Clinic)
async def save_clinic(clinic_id: int, clinic: ClinicDraft, store: DataStore = Depends(get_database)):
    """
    Save a clinic.

    Replaces the clinic with this id; an unknown id creates a new listing
    with a fresh id.
    """
    clinic.id = clinic_id
    return await ClinicService(store).save_clinic(clinic)


@router.get("/{clinic_id}/media-capability", response_model=MediaCapability)
async def get_media_capability(clinic_id: int, store: DataStore = Depends(get_database)):
    """Media allowed for the clinic's current tier."""
    clinic = await ClinicService(store).get_clinic(clinic_id)
    return media_capability(clinic.tier)


@router.post("/{clinic_id}/subscription", response_model=Clinic)
async def process_subscription(
    clinic_id: int,
    request: SubscriptionRequest,
    store: DataStore = Depends(get_database),
):
    """
    Subscribe the clinic to a paid tier.

    - **tier**: Premium or Gold
    """
    return await SubscriptionService(store).process_subscription(clinic_id, request.tier)


@router.delete("/{clinic_id}/subscription", response_model=Clinic)
async def cancel_subscription(clinic_id: int, store: DataStore = Depends(get_database)):
    """Cancel the clinic's subscription and return it to Basic."""
    return await SubscriptionService(store).cancel_subscription(clinic_id)
