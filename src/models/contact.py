"""Contact details embedded on hot sheets and client needs."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Contact(BaseModel):
    """Email-bearing profile (user profile, agent profile or client)."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    email: Optional[str] = Field(None, description="Email address")
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
