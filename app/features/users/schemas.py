from pydantic import BaseModel, Field


class JournalEntryRequest(BaseModel):
    """Request schema for saving a progress journal entry."""

    notes: str = Field("", max_length=5000)
    image_url: str = Field(..., min_length=1, description="Photo URL or base64 image data URL")
