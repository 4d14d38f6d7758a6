from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr

from app.database import DataStore, get_database
from app.features.newsletter.models import NewsletterSubscriber
from app.features.newsletter.service import NewsletterService

router = APIRouter(prefix="/newsletter", tags=["Newsletter"])


class SubscribeRequest(BaseModel):
    email: EmailStr


@router.post("", response_model=NewsletterSubscriber, status_code=status.HTTP_201_CREATED)
async def subscribe(request: SubscribeRequest, store: DataStore = Depends(get_database)):
    """Subscribe an email address to the newsletter."""
    return await NewsletterService(store).subscribe(request.email)
