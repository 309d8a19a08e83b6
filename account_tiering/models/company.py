from pydantic import BaseModel, Field
from uuid import UUID, uuid4
from datetime import datetime, timezone


class CompanyBase(BaseModel):
    """
    Base Pydantic model for the user's own company profile.
    Consumed for display only, never scored.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Company name"
    )

    description: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="What the company sells"
    )

    industry: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Industry the company operates in"
    )

    target_market: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Who the ideal customers are"
    )


class CompanyCreate(CompanyBase):
    """
    Model for step 1 of the wizard. Blank (whitespace-only) values are rejected.
    """

    model_config = {"str_strip_whitespace": True}


class Company(CompanyBase):
    """
    Company profile held by a wizard session.
    """

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique company identifier"
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
