# Users Feature - Service

from app.core.logging import logger
from app.database import DataStore
from app.features.auth.models import JOURNAL_MILESTONES, JournalEntry, User
from app.features.files.service import FileService
from app.shared.exceptions import EntityNotFoundException, ValidationFailedException
from app.shared.models import today


class UserService:
    """Service class for per-user state: favorites and the progress journal."""

    def __init__(self, store: DataStore):
        self.store = store
        self.files = FileService(store)

    def _get_user(self, user_id: str) -> User:
        user = self.store.find_user(user_id)
        if not user:
            raise EntityNotFoundException("user", user_id)
        return user

    async def toggle_favorite_clinic(self, user_id: str, clinic_id: int) -> User:
        """
        Add ``clinic_id`` to the user's favorites, or remove it if present.

        Clinic ids are not checked against the directory; an unknown id is
        stored like any other.

        The session follows automatically since it resolves by user id.
        """
        async with self.store.transaction("favorite"):
            user = self._get_user(user_id)

            if clinic_id in user.favorite_clinics:
                user.favorite_clinics = [c for c in user.favorite_clinics if c != clinic_id]
                action = "Removed"
            else:
                user.favorite_clinics = [*user.favorite_clinics, clinic_id]
                action = "Added"

            logger.info(f"{action} favorite clinic {clinic_id} for user {user_id}")
            return user.clone()

    async def save_journal_entry(
        self,
        user_id: str,
        milestone: str,
        notes: str,
        image_url: str,
    ) -> User:
        """
        Create or replace one milestone of the user's progress journal.

        Args:
            user_id: Owner of the journal
            milestone: One of JOURNAL_MILESTONES
            notes: Free-text observations
            image_url: Photo reference or a local image data URL to upload

        Returns:
            Updated user
        """
        if milestone not in JOURNAL_MILESTONES:
            raise ValidationFailedException(f"Unknown journal milestone: {milestone}")
        if not image_url:
            raise ValidationFailedException("A journal entry needs a photo")

        async with self.store.transaction("save"):
            user = self._get_user(user_id)

            entry = JournalEntry.build(
                date=today(),
                notes=notes or "",
                image_url=await self.files.resolve_image(image_url),
            )
            user.journey = {**user.journey, milestone: entry}

            logger.info(f"Saved journal entry '{milestone}' for user {user_id}")
            return user.clone()
