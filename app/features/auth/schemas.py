from pydantic import BaseModel, EmailStr, Field


# Request Schemas
class SignupRequest(BaseModel):
    """Signup request schema."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=100)


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str
