# Subscriptions Feature - Service

from app.core.logging import logger
from app.core.security import generate_billing_customer_id
from app.database import DataStore
from app.features.clinics.models import Clinic, Tier
from app.shared.exceptions import EntityNotFoundException


class SubscriptionService:
    """
    Paid tier lifecycle of a clinic.

    unverified -> (claim approved) -> Basic, owned -> (subscribe) ->
    Premium/Gold active -> (cancel) -> Basic canceled -> (subscribe) -> ...
    """

    def __init__(self, store: DataStore):
        self.store = store

    def _get_clinic(self, clinic_id: int) -> Clinic:
        clinic = self.store.find_clinic(clinic_id)
        if not clinic:
            raise EntityNotFoundException("clinic", clinic_id)
        return clinic

    async def process_subscription(self, clinic_id: int, tier: Tier) -> Clinic:
        """
        Activate a paid tier after a simulated payment-gateway round trip.

        The billing customer reference is created on the first subscription
        and reused afterwards.
        """
        async with self.store.transaction("payment"):
            clinic = self._get_clinic(clinic_id)

            clinic.tier = tier
            clinic.subscription_status = "active"
            if not clinic.billing_customer_id:
                clinic.billing_customer_id = generate_billing_customer_id()

            logger.info(
                f"Clinic {clinic_id} subscribed to {clinic.tier.value} "
                f"(customer {clinic.billing_customer_id})"
            )
            return clinic.clone()

    async def cancel_subscription(self, clinic_id: int) -> Clinic:
        """Drop the clinic back to Basic. The billing reference is kept."""
        async with self.store.transaction("payment"):
            clinic = self._get_clinic(clinic_id)

            clinic.tier = Tier.BASIC
            clinic.subscription_status = "canceled"

            logger.info(f"Clinic {clinic_id} canceled its subscription")
            return clinic.clone()
