from typing import Optional

from fastapi import APIRouter, Depends, status

from app.database import DataStore, get_database
from app.features.auth.models import User
from app.features.auth.schemas import LoginRequest, SignupRequest
from app.features.auth.service import AuthService
from app.shared.schemas import MessageResponse


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=User, status_code=status.HTTP_201_CREATED)
async def signup(signup_data: SignupRequest, store: DataStore = Depends(get_database)):
    """
    Register a new patient account and log it in.

    - **name**: User's display name
    - **email**: User's email address (unique, case-insensitive)
    - **password**: Password
    """
    return await AuthService(store).signup(
        signup_data.name, signup_data.email, signup_data.password
    )


@router.post("/login", response_model=User)
async def login(login_data: LoginRequest, store: DataStore = Depends(get_database)):
    """
    Log in with email and password.

    - **email**: User's email address
    - **password**: User's password
    """
    return await AuthService(store).login(login_data.email, login_data.password)


@router.post("/logout", response_model=MessageResponse)
async def logout(store: DataStore = Depends(get_database)):
    """Log out the current user."""
    await AuthService(store).logout()
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=Optional[User])
async def get_me(store: DataStore = Depends(get_database)):
    """Get the currently logged-in user, or null."""
    return AuthService(store).current_user()
