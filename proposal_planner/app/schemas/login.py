"""Schema for the placeholder login form."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str
    password: str
