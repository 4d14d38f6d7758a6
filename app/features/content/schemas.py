from typing import Optional

from app.features.content.models import BlogPost, ProductReview


class BlogPostDraft(BlogPost):
    """Blog post as sent by an editor; ``id`` is omitted for a new post."""

    id: Optional[int] = None


class ProductReviewDraft(ProductReview):
    """Product review as sent by an editor; ``id`` is omitted for a new review."""

    id: Optional[int] = None
