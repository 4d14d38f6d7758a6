# Content router
from fastapi import APIRouter, Depends, status

from app.database import DataStore, get_database
from app.features.content.models import BlogPost, ProductReview
from app.features.content.schemas import BlogPostDraft, ProductReviewDraft
from app.features.content.service import ContentService

blog_router = APIRouter(prefix="/blog", tags=["Blog"])
products_router = APIRouter(prefix="/products", tags=["Products"])


@blog_router.post("", response_model=BlogPost, status_code=status.HTTP_201_CREATED)
async def create_blog_post(post: BlogPostDraft, store: DataStore = Depends(get_database)):
    """Create a blog post."""
    post.id = None
    return await ContentService(store).save_blog_post(post)


@blog_router.put("/{post_id}", response_model=BlogPost)
async def save_blog_post(post_id: int, post: BlogPostDraft, store: DataStore = Depends(get_database)):
    """Save a blog post (an unknown id creates a new post)."""
    post.id = post_id
    return await ContentService(store).save_blog_post(post)


@blog_router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog_post(post_id: int, store: DataStore = Depends(get_database)):
    """Delete a blog post."""
    await ContentService(store).delete_blog_post(post_id)


@products_router.post("", response_model=ProductReview, status_code=status.HTTP_201_CREATED)
async def create_product_review(review: ProductReviewDraft, store: DataStore = Depends(get_database)):
    """Create a product review."""
    review.id = None
    return await ContentService(store).save_product_review(review)


@products_router.put("/{review_id}", response_model=ProductReview)
async def save_product_review(
    review_id: int,
    review: ProductReviewDraft,
    store: DataStore = Depends(get_database),
):
    """Save a product review (an unknown id creates a new review)."""
    review.id = review_id
    return await ContentService(store).save_product_review(review)


@products_router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product_review(review_id: int, store: DataStore = Depends(get_database)):
    """Delete a product review."""
    await ContentService(store).delete_product_review(review_id)
