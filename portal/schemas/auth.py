"""Authenticated principal decoded from a bearer token."""

from typing import Literal

from pydantic import BaseModel


class CurrentAccount(BaseModel):
    """Identity claims carried by a valid access token."""

    email: str
    role: Literal["student", "faculty", "representative"]
