from pydantic import BaseModel, Field
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Optional


class AccountBase(BaseModel):
    """
    Base Pydantic model for a prospect account.
    Only the name is required; firmographics are free-form labels.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Account (company) name"
    )

    industry: str = Field(default="", max_length=100)
    company_size: str = Field(default="", max_length=100, description="e.g. '51-200 employees'")
    revenue: str = Field(default="", max_length=100, description="e.g. '$10M - $50M'")
    location: str = Field(default="", max_length=255)
    website: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = Field(default=None, max_length=5000)


class AccountCreate(AccountBase):
    """
    Model for adding an account in step 3.
    """

    model_config = {"str_strip_whitespace": True}


class Account(AccountBase):
    """
    Account as held by a wizard session and scored by the engine.
    """

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique account identifier"
    )

    owner_id: str = Field(
        default="current_user",
        description="Owner of the wizard session"
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Record creation timestamp"
    )

    model_config = {"from_attributes": True}
