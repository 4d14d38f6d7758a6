# Clinic Directory Feature

from enum import Enum
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from app.config import settings
from app.features.reviews.models import Review
from app.shared.models import StoreModel


class Tier(str, Enum):
    """Paid service level of a clinic listing."""

    BASIC = "Basic"
    PREMIUM = "Premium"
    GOLD = "Gold"


class MediaCapability(BaseModel):
    """Media a clinic may publish at a given tier."""

    max_gallery_images: Optional[int]  # None means unbounded
    video_allowed: bool

    def allows_gallery(self) -> bool:
        return self.max_gallery_images is None or self.max_gallery_images > 0


def media_capability(tier: Tier) -> MediaCapability:
    """Map a tier to its media capability."""
    if tier == Tier.GOLD:
        return MediaCapability(max_gallery_images=None, video_allowed=True)
    if tier == Tier.PREMIUM:
        return MediaCapability(
            max_gallery_images=settings.PREMIUM_GALLERY_LIMIT,
            video_allowed=False,
        )
    return MediaCapability(max_gallery_images=0, video_allowed=False)


class Contact(StoreModel):
    phone: str = ""
    website: str = ""


class Clinic(StoreModel):
    """Clinic listing with its approved reviews embedded."""

    id: int
    name: str
    tier: Tier = Tier.BASIC
    city: str
    country: str
    address: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    rating: float = 0.0
    review_count: int = 0
    short_description: str = ""
    long_description: str = ""
    treatments: List[int] = Field(default_factory=list)
    contact: Contact = Field(default_factory=Contact)
    reviews: List[Review] = Field(default_factory=list)
    image_url: str = ""
    gallery_images: List[str] = Field(default_factory=list)
    video_url: Optional[str] = None
    verified: bool = False
    owner_id: Optional[str] = None
    subscription_status: Optional[Literal["active", "canceled"]] = None
    billing_customer_id: Optional[str] = None

    # Ratings aggregated from an external review platform
    aggregated_rating: Optional[float] = None
    aggregated_review_count: Optional[int] = None
    review_source: Optional[str] = None
    review_source_url: Optional[str] = None

    def add_approved_review(self, review: Review) -> None:
        """Prepend an approved review and fold its rating into the average."""
        total = self.rating * self.review_count + review.rating
        self.review_count += 1
        self.rating = round(total / self.review_count, 1)
        self.reviews = [review, *self.reviews]


class Treatment(StoreModel):
    id: int
    name: str
    description: str


class City(StoreModel):
    name: str
    country: str
    image_url: str
