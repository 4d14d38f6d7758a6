# Users router
from fastapi import APIRouter, Depends

from app.database import DataStore, get_database
from app.features.auth.models import User
from app.features.users.schemas import JournalEntryRequest
from app.features.users.service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/{user_id}/favorites/{clinic_id}", response_model=User)
async def toggle_favorite(user_id: str, clinic_id: int, store: DataStore = Depends(get_database)):
    """Toggle a clinic in the user's favorites."""
    return await UserService(store).toggle_favorite_clinic(user_id, clinic_id)


@router.put("/{user_id}/journey/{milestone}", response_model=User)
async def save_journal_entry(
    user_id: str,
    milestone: str,
    request: JournalEntryRequest,
    store: DataStore = Depends(get_database),
):
    """
    Save a progress journal entry.

    - **milestone**: preOp, month1, month3, month6, month9 or month12
    - **notes**: Free-text notes
    - **image_url**: Photo URL, or a base64 data URL which is uploaded first
    """
    return await UserService(store).save_journal_entry(
        user_id, milestone, request.notes, request.image_url
    )
