# Clinic schemas
from typing import Optional

from pydantic import Field

from app.features.clinics.models import Clinic


class ClinicDraft(Clinic):
    """
    Clinic as sent by an editor.

    ``id`` is omitted for a new listing. Image fields may hold base64 data
    URLs which are uploaded before the clinic is stored.
    """

    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=200)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
