"""Clinic upsert, media pipeline, tier capability and subscriptions."""

import pytest

from app.config import settings
from app.features.clinics.models import Tier, media_capability
from app.features.clinics.schemas import ClinicDraft
from app.features.clinics.service import ClinicService
from app.features.reviews.service import ReviewService
from app.features.subscriptions.service import SubscriptionService
from app.shared.exceptions import EntityNotFoundException


def new_draft(**overrides) -> ClinicDraft:
    data = dict(
        name="Lisbon Graft Studio",
        city="Lisbon",
        country="Portugal",
        address="Av. da Liberdade 100",
        treatments=[1],
        image_url="https://images.example.com/lisbon.jpg",
    )
    data.update(overrides)
    return ClinicDraft(**data)


@pytest.mark.asyncio
async def test_save_clinic_updates_in_place(store):
    clinics = ClinicService(store)
    existing = await clinics.get_clinic(2)
    draft = ClinicDraft(**existing.model_dump())
    draft.name = "New Name"

    saved = await clinics.save_clinic(draft)

    assert saved.id == 2
    assert saved.name == "New Name"
    assert [c.id for c in store.clinics] == [1, 2, 3, 4]
    assert store.clinics[1].name == "New Name"


@pytest.mark.asyncio
async def test_save_clinic_without_id_creates_one(store):
    saved = await ClinicService(store).save_clinic(new_draft())

    assert saved.id not in (1, 2, 3, 4)
    assert store.clinics[0].id == saved.id
    assert len(store.clinics) == 5
    assert sum(1 for c in store.clinics if c.name == "Lisbon Graft Studio") == 1


@pytest.mark.asyncio
async def test_save_clinic_with_unknown_id_creates_one(store):
    saved = await ClinicService(store).save_clinic(new_draft(id=987654))
    assert saved.id != 987654
    assert store.clinics[0].id == saved.id


@pytest.mark.asyncio
async def test_update_keeps_moderated_reviews(store):
    clinics = ClinicService(store)
    existing = await clinics.get_clinic(1)
    draft = ClinicDraft(**existing.model_dump())
    draft.reviews = []

    saved = await clinics.save_clinic(draft)

    assert [r.id for r in saved.reviews] == [101, 102]


@pytest.mark.asyncio
async def test_partial_update_keeps_rating_and_billing(store):
    saved = await ClinicService(store).save_clinic(
        ClinicDraft(id=1, name="Bosphorus Renamed", city="Istanbul", country="Turkey")
    )

    assert saved.name == "Bosphorus Renamed"
    assert saved.rating == 4.8
    assert saved.review_count == len(saved.reviews) == 2
    assert saved.billing_customer_id == "cus_seedbosphorus01"

    clinic = await SubscriptionService(store).process_subscription(1, Tier.GOLD)
    assert clinic.billing_customer_id == "cus_seedbosphorus01"


@pytest.mark.asyncio
async def test_stale_draft_does_not_undo_moderation(store):
    clinics = ClinicService(store)
    draft = ClinicDraft(**(await clinics.get_clinic(1)).model_dump())

    review = await ReviewService(store).submit_review(1, "user-patient-2", 2, "Slow recovery")
    await ReviewService(store).approve_review(review.id)
    moderated = await clinics.get_clinic(1)

    saved = await clinics.save_clinic(draft)

    assert saved.review_count == len(saved.reviews) == 3
    assert saved.rating == moderated.rating
    assert saved.reviews[0].id == review.id


@pytest.mark.asyncio
async def test_new_clinic_ignores_derived_fields(store):
    saved = await ClinicService(store).save_clinic(
        new_draft(rating=4.9, review_count=40, billing_customer_id="cus_forged", subscription_status="active")
    )

    assert saved.rating == 0.0
    assert saved.review_count == 0
    assert saved.billing_customer_id is None
    assert saved.subscription_status is None


@pytest.mark.asyncio
async def test_new_clinic_starts_without_reviews(store):
    existing = await ClinicService(store).get_clinic(1)
    draft = new_draft(reviews=[r.model_dump() for r in existing.reviews])

    saved = await ClinicService(store).save_clinic(draft)

    assert saved.reviews == []


@pytest.mark.asyncio
async def test_save_clinic_uploads_local_images(store, make_image):
    hero = make_image((10, 120, 200))
    gallery = [make_image((1, 2, 3)), "", "https://images.example.com/kept.jpg"]

    saved = await ClinicService(store).save_clinic(
        new_draft(tier=Tier.PREMIUM, image_url=hero, gallery_images=gallery)
    )

    assert saved.image_url.startswith(settings.MEDIA_BASE_URL)
    assert len(saved.gallery_images) == 2
    assert saved.gallery_images[0].startswith(settings.MEDIA_BASE_URL)
    assert saved.gallery_images[1] == "https://images.example.com/kept.jpg"
    assert not any(url.startswith("data:") for url in store.clinics[0].gallery_images)


@pytest.mark.asyncio
async def test_premium_gallery_is_capped(store):
    gallery = [f"https://images.example.com/{i}.jpg" for i in range(8)]

    saved = await ClinicService(store).save_clinic(
        new_draft(tier=Tier.PREMIUM, gallery_images=gallery, video_url="https://v.example.com/x.mp4")
    )

    assert saved.gallery_images == gallery[:settings.PREMIUM_GALLERY_LIMIT]
    assert saved.video_url is None


@pytest.mark.asyncio
async def test_gold_gallery_is_unbounded(store):
    gallery = [f"https://images.example.com/{i}.jpg" for i in range(12)]

    saved = await ClinicService(store).save_clinic(
        new_draft(tier=Tier.GOLD, gallery_images=gallery, video_url="https://v.example.com/x.mp4")
    )

    assert len(saved.gallery_images) == 12
    assert saved.video_url == "https://v.example.com/x.mp4"


@pytest.mark.asyncio
async def test_basic_clinic_has_no_gallery(store):
    saved = await ClinicService(store).save_clinic(
        new_draft(gallery_images=["https://images.example.com/a.jpg"])
    )
    assert saved.gallery_images == []


@pytest.mark.asyncio
async def test_downgraded_clinic_loses_gallery_and_video_on_save(store, caplog):
    clinics = ClinicService(store)
    draft = ClinicDraft(**(await clinics.get_clinic(1)).model_dump())
    draft.tier = Tier.BASIC
    draft.gallery_images = ["https://images.example.com/a.jpg", "https://images.example.com/b.jpg"]
    draft.video_url = "https://v.example.com/tour.mp4"

    saved = await clinics.save_clinic(draft)

    assert saved.gallery_images == []
    assert saved.video_url is None
    assert "gallery dropped" in caplog.text


def test_media_capability_by_tier():
    assert media_capability(Tier.BASIC).allows_gallery() is False
    assert media_capability(Tier.PREMIUM).max_gallery_images == 5
    assert media_capability(Tier.PREMIUM).video_allowed is False
    assert media_capability(Tier.GOLD).max_gallery_images is None
    assert media_capability(Tier.GOLD).video_allowed is True


@pytest.mark.asyncio
async def test_get_unknown_clinic_fails(store):
    with pytest.raises(EntityNotFoundException):
        await ClinicService(store).get_clinic(999)


# ---- subscriptions ----


@pytest.mark.asyncio
async def test_subscription_round_trip(store):
    subscriptions = SubscriptionService(store)

    clinic = await subscriptions.process_subscription(3, Tier.GOLD)
    assert clinic.tier == Tier.GOLD
    assert clinic.subscription_status == "active"
    assert clinic.billing_customer_id.startswith("cus_")
    customer = clinic.billing_customer_id

    clinic = await subscriptions.cancel_subscription(3)
    assert clinic.tier == Tier.BASIC
    assert clinic.subscription_status == "canceled"
    assert clinic.billing_customer_id == customer

    clinic = await subscriptions.process_subscription(3, Tier.PREMIUM)
    assert clinic.tier == Tier.PREMIUM
    assert clinic.subscription_status == "active"
    assert clinic.billing_customer_id == customer


@pytest.mark.asyncio
async def test_subscription_keeps_existing_billing_reference(store):
    clinic = await SubscriptionService(store).process_subscription(1, Tier.PREMIUM)
    assert clinic.billing_customer_id == "cus_seedbosphorus01"


@pytest.mark.asyncio
async def test_subscription_for_unknown_clinic_fails(store):
    subscriptions = SubscriptionService(store)
    with pytest.raises(EntityNotFoundException):
        await subscriptions.process_subscription(999, Tier.GOLD)
    with pytest.raises(EntityNotFoundException):
        await subscriptions.cancel_subscription(999)
