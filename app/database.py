"""In-memory data store standing in for the hosted backend database."""

import asyncio
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from app.config import settings
from app.core.latency import Latency
from app.core.logging import logger
from app.core.security import AcceptAnyPassword, CredentialChecker
from app.data.seed import build_seed
from app.features.auth.models import User
from app.features.claims.models import ClaimRequest
from app.features.clinics.models import City, Clinic, Treatment
from app.features.content.models import BlogPost, ProductReview
from app.features.newsletter.models import NewsletterSubscriber
from app.features.reviews.models import Review
from app.features.submissions.models import ListingSubmission


class DataStore:
    """
    Owns every entity collection and the process-wide session pointer.

    Services mutate the collections only inside ``transaction()``, which
    serialises operations and restores the previous state if the operation
    raises. Records handed to callers are always clones.
    """

    COLLECTIONS = (
        "clinics",
        "blog_posts",
        "product_reviews",
        "pending_claims",
        "pending_submissions",
        "users",
        "pending_reviews",
        "newsletter_subscribers",
        "treatments",
        "cities",
    )

    def __init__(
        self,
        latency: Optional[Latency] = None,
        credentials: Optional[CredentialChecker] = None,
    ):
        self.latency = latency or Latency()
        self.credentials = credentials or AcceptAnyPassword()
        self._lock = asyncio.Lock()
        self.reset()

    @classmethod
    def seeded(cls, session_role: Optional[str] = None, **kwargs) -> "DataStore":
        """Create a store loaded with the initial datasets."""
        store = cls(**kwargs)
        store.load(build_seed())
        role = settings.SEED_SESSION_ROLE if session_role is None else session_role
        if role:
            user = next((u for u in store.users if u.role == role), None)
            store.session_user_id = user.id if user else None
        return store

    def reset(self) -> None:
        """Drop every record and the session."""
        self.clinics: List[Clinic] = []
        self.blog_posts: List[BlogPost] = []
        self.product_reviews: List[ProductReview] = []
        self.pending_claims: List[ClaimRequest] = []
        self.pending_submissions: List[ListingSubmission] = []
        self.users: List[User] = []
        self.pending_reviews: List[Review] = []
        self.newsletter_subscribers: List[NewsletterSubscriber] = []
        self.treatments: List[Treatment] = []
        self.cities: List[City] = []
        self.session_user_id: Optional[str] = None
        self._last_id = 0

    def load(self, data: Dict[str, list]) -> None:
        """Replace collections with clones of ``data``."""
        for name in self.COLLECTIONS:
            if name in data:
                setattr(self, name, [item.clone() for item in data[name]])
        ids = [
            item.id
            for name in self.COLLECTIONS
            for item in getattr(self, name)
            if isinstance(getattr(item, "id", None), int)
        ]
        ids.extend(review.id for clinic in self.clinics for review in clinic.reviews)
        self._last_id = max(ids, default=0)

    def next_id(self) -> int:
        """Allocate a unique integer id."""
        self._last_id += 1
        return self._last_id

    # ---- session ----

    @property
    def session_user(self) -> Optional[User]:
        if self.session_user_id is None:
            return None
        return self.find_user(self.session_user_id)

    # ---- lookups (return canonical records, never hand them out) ----

    def find_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users if u.has_email(email)), None)

    def find_clinic(self, clinic_id: int) -> Optional[Clinic]:
        return next((c for c in self.clinics if c.id == clinic_id), None)

    @staticmethod
    def index_of(items: list, item_id) -> int:
        """Position of the record with ``item_id``, or -1."""
        return next((i for i, item in enumerate(items) if item.id == item_id), -1)

    # ---- transactions ----

    def _snapshot(self) -> dict:
        state = {name: [item.clone() for item in getattr(self, name)] for name in self.COLLECTIONS}
        state["session_user_id"] = self.session_user_id
        state["_last_id"] = self._last_id
        return state

    def _restore(self, state: dict) -> None:
        for key, value in state.items():
            setattr(self, key, value)

    @asynccontextmanager
    async def transaction(self, operation: str):
        """
        Run one store operation atomically.

        Waits the simulated latency of ``operation`` first, then yields the
        store. Any exception rolls every collection back.
        """
        async with self._lock:
            await self.latency.wait(operation)
            state = self._snapshot()
            try:
                yield self
            except Exception:
                self._restore(state)
                logger.debug(f"Rolled back '{operation}'")
                raise


class Database:
    """Store lifecycle manager."""

    store: Optional[DataStore] = None

    @classmethod
    async def connect_db(cls):
        """Create the store from the seed datasets."""
        cls.store = DataStore.seeded(latency=Latency.from_settings(settings))
        logger.info(
            f"Store ready: {len(cls.store.clinics)} clinics, {len(cls.store.users)} users"
        )

    @classmethod
    async def close_db(cls):
        """Discard the store."""
        if cls.store:
            cls.store = None
            logger.info("Store discarded")


async def get_database() -> DataStore:
    """Dependency for store access."""
    return Database.store
