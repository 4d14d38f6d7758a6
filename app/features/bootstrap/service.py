from app.core.logging import logger
from app.database import DataStore
from app.features.bootstrap.schemas import BootstrapData


class BootstrapService:
    """Initial data load for the frontend."""

    def __init__(self, store: DataStore):
        self.store = store

    async def get_all_data(self) -> BootstrapData:
        """Snapshot of every collection plus the logged-in user."""
        async with self.store.transaction("bootstrap") as db:
            session_user = db.session_user
            data = BootstrapData(
                **{name: [item.clone() for item in getattr(db, name)] for name in db.COLLECTIONS},
                current_user=session_user.clone() if session_user else None,
            )
            logger.info("Fetched initial data")
            return data
