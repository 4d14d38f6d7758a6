from app.core.logging import logger
from app.database import DataStore
from app.features.newsletter.models import NewsletterSubscriber
from app.shared.exceptions import DuplicateSubscriptionException
from app.shared.models import today


class NewsletterService:
    """Newsletter sign-ups."""

    def __init__(self, store: DataStore):
        self.store = store

    async def subscribe(self, email: str) -> NewsletterSubscriber:
        """
        Subscribe an email address.

        Raises:
            DuplicateSubscriptionException: already subscribed (any case)
        """
        async with self.store.transaction("newsletter") as db:
            wanted = email.strip().lower()
            if any(s.email.lower() == wanted for s in db.newsletter_subscribers):
                raise DuplicateSubscriptionException(email)

            subscriber = NewsletterSubscriber.build(
                id=db.next_id(),
                email=email.strip(),
                subscribed_at=today(),
            )
            db.newsletter_subscribers = [subscriber, *db.newsletter_subscribers]

            logger.info(f"New newsletter subscriber {subscriber.email}")
            return subscriber.clone()
