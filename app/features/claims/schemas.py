from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

from app.features.auth.models import User
from app.features.clinics.models import Clinic


class CreateClaimRequest(BaseModel):
    """Request schema for claiming a clinic listing."""

    clinic_id: int
    clinic_name: str = Field(..., min_length=1, max_length=200)
    submitter_name: str = Field(..., min_length=1, max_length=100)
    submitter_title: str = Field(..., min_length=1, max_length=100)
    submitter_email: EmailStr
    verification_method: Literal["email", "document"] = "email"
    document_proof: Optional[str] = None

    @model_validator(mode="after")
    def require_document(self):
        if self.verification_method == "document" and not self.document_proof:
            raise ValueError("document_proof is required for document verification")
        return self


class ClaimApprovalResponse(BaseModel):
    """Clinic and user after a claim approval."""

    clinic: Clinic
    user: User
