from pydantic import EmailStr

from app.shared.models import StoreModel


class NewsletterSubscriber(StoreModel):
    id: int
    email: EmailStr
    subscribed_at: str
