from pydantic import BaseModel, Field


class CreateSubmissionRequest(BaseModel):
    """Request schema for proposing a new clinic."""

    clinic_name: str = Field(..., min_length=1, max_length=200)
    clinic_city: str = Field(..., min_length=1, max_length=100)
    clinic_country: str = Field("", max_length=100)
    clinic_address: str = Field(..., min_length=1, max_length=500)
    clinic_phone: str = Field(..., min_length=1, max_length=30)
    clinic_website: str = Field(..., min_length=1, max_length=300)
    submitter_name: str = Field(..., min_length=1, max_length=100)
    submitter_id: str = Field(..., min_length=1)
