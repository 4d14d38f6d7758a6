from typing import List, Optional

from pydantic import BaseModel

from app.features.auth.models import User
from app.features.claims.models import ClaimRequest
from app.features.clinics.models import City, Clinic, Treatment
from app.features.content.models import BlogPost, ProductReview
from app.features.newsletter.models import NewsletterSubscriber
from app.features.reviews.models import Review
from app.features.submissions.models import ListingSubmission


class BootstrapData(BaseModel):
    """Everything the frontend loads on start-up."""

    clinics: List[Clinic]
    blog_posts: List[BlogPost]
    product_reviews: List[ProductReview]
    pending_claims: List[ClaimRequest]
    pending_submissions: List[ListingSubmission]
    users: List[User]
    pending_reviews: List[Review]
    newsletter_subscribers: List[NewsletterSubscriber]
    treatments: List[Treatment]
    cities: List[City]
    current_user: Optional[User] = None
