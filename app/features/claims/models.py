from typing import Annotated, Literal, Union

from pydantic import EmailStr, Field

from app.shared.models import StoreModel


class EmailVerification(StoreModel):
    """Ownership proven through a mailbox on the clinic's domain."""

    method: Literal["email"] = "email"


class DocumentVerification(StoreModel):
    """Ownership proven through an uploaded document."""

    method: Literal["document"] = "document"
    document_proof: str = Field(..., min_length=1)


Verification = Annotated[
    Union[EmailVerification, DocumentVerification],
    Field(discriminator="method"),
]


class ClaimRequest(StoreModel):
    """Request from a clinic representative to take over a listing."""

    id: int
    clinic_id: int
    clinic_name: str
    submitter_name: str
    submitter_title: str
    submitter_email: EmailStr
    verification: Verification = Field(default_factory=EmailVerification)
    status: Literal["pending"] = "pending"
