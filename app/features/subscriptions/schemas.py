from pydantic import BaseModel

from app.features.clinics.models import Tier


class SubscriptionRequest(BaseModel):
    """Request schema for starting or changing a paid subscription."""

    tier: Tier
