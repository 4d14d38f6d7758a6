# Content Feature - Service

from app.core.logging import logger
from app.database import DataStore
from app.features.content.models import BlogPost, ProductReview
from app.features.content.schemas import BlogPostDraft, ProductReviewDraft
from app.shared.models import StoreModel


class ContentService:
    """Service class for editorial content: blog posts and product reviews."""

    def __init__(self, store: DataStore):
        self.store = store

    async def _upsert(self, collection: str, model: type, draft: StoreModel):
        """
        Replace the record with the draft's id in place, or create it at the
        front of ``collection`` under a new id.
        """
        async with self.store.transaction("save") as db:
            items = getattr(db, collection)
            index = db.index_of(items, draft.id) if draft.id is not None else -1
            data = draft.model_dump(exclude={"id"})

            if index > -1:
                saved = model.build(id=draft.id, **data)
                setattr(db, collection, [*items[:index], saved, *items[index + 1:]])
                logger.info(f"Updated {model.__name__} {saved.id}")
            else:
                saved = model.build(id=db.next_id(), **data)
                setattr(db, collection, [saved, *items])
                logger.info(f"Created {model.__name__} {saved.id}")

            return saved.clone()

    async def _delete(self, collection: str, record_id: int) -> None:
        async with self.store.transaction("delete") as db:
            setattr(db, collection, [i for i in getattr(db, collection) if i.id != record_id])
            logger.info(f"Deleted {collection} record {record_id}")

    async def save_blog_post(self, post: BlogPostDraft) -> BlogPost:
        """Create or update a blog post."""
        return await self._upsert("blog_posts", BlogPost, post)

    async def save_product_review(self, review: ProductReviewDraft) -> ProductReview:
        """Create or update a product review."""
        return await self._upsert("product_reviews", ProductReview, review)

    async def delete_blog_post(self, post_id: int) -> None:
        """Delete a blog post. Unknown ids are ignored."""
        await self._delete("blog_posts", post_id)

    async def delete_product_review(self, review_id: int) -> None:
        """Delete a product review. Unknown ids are ignored."""
        await self._delete("product_reviews", review_id)
