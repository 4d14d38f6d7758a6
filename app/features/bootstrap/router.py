from fastapi import APIRouter, Depends

from app.database import DataStore, get_database
from app.features.bootstrap.schemas import BootstrapData
from app.features.bootstrap.service import BootstrapService

router = APIRouter(tags=["Bootstrap"])


@router.get("/bootstrap", response_model=BootstrapData)
async def get_all_data(store: DataStore = Depends(get_database)):
    """Load every collection and the logged-in user."""
    return await BootstrapService(store).get_all_data()
