from pydantic import Field

from app.shared.models import StoreModel


class BlogPost(StoreModel):
    id: int
    title: str
    author: str
    date: str
    summary: str
    content: str
    image_url: str = ""


class ProductReview(StoreModel):
    """Editorial review of a hair-care product with an affiliate link."""

    id: int
    name: str
    rating: float = Field(..., ge=0, le=5)
    summary: str
    full_review: str
    affiliate_link: str
    image_url: str = ""
    category_id: int
