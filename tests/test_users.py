"""Favorites and the progress journal."""

import pytest

from app.config import settings
from app.features.auth.service import AuthService
from app.features.users.service import UserService
from app.shared.exceptions import EntityNotFoundException, ValidationFailedException


@pytest.mark.asyncio
async def test_toggle_favorite_is_symmetric(store):
    users = UserService(store)
    original = list(store.find_user("user-patient-1").favorite_clinics)

    added = await users.toggle_favorite_clinic("user-patient-1", 4)
    removed = await users.toggle_favorite_clinic("user-patient-1", 4)

    assert added.favorite_clinics == original + [4]
    assert removed.favorite_clinics == original


@pytest.mark.asyncio
async def test_toggle_favorite_removes_existing(store):
    user = await UserService(store).toggle_favorite_clinic("user-patient-1", 1)
    assert user.favorite_clinics == [2]


@pytest.mark.asyncio
async def test_toggle_favorite_accepts_unknown_clinic(store):
    user = await UserService(store).toggle_favorite_clinic("user-patient-2", 4040)
    assert user.favorite_clinics == [4040]


@pytest.mark.asyncio
async def test_toggle_favorite_unknown_user_fails(store):
    with pytest.raises(EntityNotFoundException) as exc_info:
        await UserService(store).toggle_favorite_clinic("user-nobody", 1)
    assert exc_info.value.entity == "user"


@pytest.mark.asyncio
async def test_save_journal_entry(store):
    user = await UserService(store).save_journal_entry(
        "user-patient-1", "month3", "Shedding has stopped.", "https://images.example.com/m3.jpg"
    )

    assert set(user.journey) == {"preOp", "month3"}
    entry = user.journey["month3"]
    assert entry.notes == "Shedding has stopped."
    assert entry.image_url == "https://images.example.com/m3.jpg"
    assert len(entry.date) == 10


@pytest.mark.asyncio
async def test_save_journal_entry_replaces_milestone(store):
    users = UserService(store)
    user = await users.save_journal_entry(
        "user-patient-1", "preOp", "Retake", "https://images.example.com/preop-2.jpg"
    )
    assert user.journey["preOp"].notes == "Retake"
    assert len(user.journey) == 1


@pytest.mark.asyncio
async def test_save_journal_entry_uploads_photo(store, png_data_url):
    user = await UserService(store).save_journal_entry("user-patient-2", "month1", "", png_data_url)
    assert user.journey["month1"].image_url.startswith(settings.MEDIA_BASE_URL)


@pytest.mark.asyncio
async def test_save_journal_entry_refreshes_session(store):
    auth = AuthService(store)
    await auth.login("sofia.marin@example.com", "pw")

    await UserService(store).save_journal_entry(
        "user-patient-2", "month6", "Visible density.", "https://images.example.com/m6.jpg"
    )

    assert "month6" in auth.current_user().journey


@pytest.mark.asyncio
async def test_save_journal_entry_rejects_unknown_milestone(store):
    with pytest.raises(ValidationFailedException):
        await UserService(store).save_journal_entry(
            "user-patient-1", "month2", "", "https://images.example.com/x.jpg"
        )


@pytest.mark.asyncio
async def test_save_journal_entry_requires_photo(store):
    with pytest.raises(ValidationFailedException):
        await UserService(store).save_journal_entry("user-patient-1", "month1", "notes", "")


@pytest.mark.asyncio
async def test_save_journal_entry_unknown_user_fails(store):
    with pytest.raises(EntityNotFoundException):
        await UserService(store).save_journal_entry(
            "user-nobody", "month1", "", "https://images.example.com/x.jpg"
        )
