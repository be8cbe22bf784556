from datetime import datetime

from pydantic import BaseModel


# ============ Request Schemas ============
# Length and format rules live in AuthService so they apply in a fixed order.

class RegisterRequest(BaseModel):
    username: str | None = None
    password: str | None = None
    email: str | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


# ============ Response Schemas ============

class UserSummary(BaseModel):
    id: int
    username: str

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    id: int
    username: str
    email: str | None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class MeResponse(BaseModel):
    authenticated: bool
    user: UserResponse | None = None


class MessageResponse(BaseModel):
    message: str
