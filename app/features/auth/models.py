from typing import Dict, List, Literal

from pydantic import EmailStr, Field

from app.shared.models import StoreModel


Role = Literal["admin", "clinic-owner", "patient"]

# Milestones of the patient progress journal, in display order
JOURNAL_MILESTONES = ("preOp", "month1", "month3", "month6", "month9", "month12")


class JournalEntry(StoreModel):
    """One milestone of a patient's progress journal."""

    date: str
    notes: str = ""
    image_url: str


class User(StoreModel):
    """User record."""

    id: str
    name: str
    email: EmailStr
    role: Role = "patient"
    favorite_clinics: List[int] = Field(default_factory=list)
    journey: Dict[str, JournalEntry] = Field(default_factory=dict)

    def has_email(self, email: str) -> bool:
        """Case-insensitive email match."""
        return self.email.lower() == email.strip().lower()
