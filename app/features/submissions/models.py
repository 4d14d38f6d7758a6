from typing import Literal

from app.shared.models import StoreModel


class ListingSubmission(StoreModel):
    """Patient proposal to add a new clinic to the directory."""

    id: int
    clinic_name: str
    clinic_city: str
    clinic_country: str = ""
    clinic_address: str
    clinic_phone: str
    clinic_website: str
    submitter_name: str
    submitter_id: str
    status: Literal["pending"] = "pending"
