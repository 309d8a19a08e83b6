from pydantic import BaseModel, Field, field_validator, model_validator
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Optional, List

from account_tiering.config import settings
from account_tiering.models.enumerations import QuestionType


def _check_weight(value: float) -> float:
    if not settings.MIN_QUESTION_WEIGHT <= value <= settings.MAX_QUESTION_WEIGHT:
        raise ValueError(
            f"Question weight must be between {settings.MIN_QUESTION_WEIGHT:g} "
            f"and {settings.MAX_QUESTION_WEIGHT:g}"
        )
    return value


class QuestionBase(BaseModel):
    """
    Base Pydantic model for an evaluation question.
    """

    text: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="Question shown to the evaluator"
    )

    type: QuestionType = Field(
        default=QuestionType.BOOLEAN,
        description="Answer type (boolean, number, multiple_choice)"
    )

    weight: float = Field(
        default=settings.DEFAULT_QUESTION_WEIGHT,
        allow_inf_nan=False,
        description="Relative importance; contributes to the maximum score"
    )

    options: Optional[List[str]] = Field(
        default=None,
        description="Ordered answer options (multiple_choice only)"
    )


class QuestionCreate(QuestionBase):
    """
    Model for adding a question in the criteria builder.
    Enforces the weight range and drops blank options.
    """

    model_config = {"str_strip_whitespace": True}

    @field_validator("weight")
    @classmethod
    def validate_weight(cls, value: float) -> float:
        return _check_weight(value)

    @model_validator(mode="after")
    def normalize_options(self):
        """Keep options only for multiple_choice, which needs at least one."""
        if self.type != QuestionType.MULTIPLE_CHOICE:
            self.options = None
            return self
        options = [opt.strip() for opt in (self.options or []) if opt and opt.strip()]
        if not options:
            raise ValueError("Multiple choice questions need at least one option")
        self.options = options
        return self


class WeightUpdate(BaseModel):
    """
    Model for changing the weight of an existing question.
    """

    weight: float = Field(..., allow_inf_nan=False, description="New question weight")

    @field_validator("weight")
    @classmethod
    def validate_weight(cls, value: float) -> float:
        return _check_weight(value)


class Question(QuestionBase):
    """
    Question as consumed by the scoring engine.

    The engine accepts any finite weight; range checks live in QuestionCreate.
    """

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique question identifier"
    )

    company_id: Optional[UUID] = Field(
        default=None,
        description="Company whose criteria this question belongs to"
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
