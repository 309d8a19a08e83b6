from pydantic import BaseModel, Field, StrictBool, StrictStr, TypeAdapter, field_validator
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import Annotated, Literal, Union


class BooleanAnswer(BaseModel):
    """Yes / No answer. Only a real boolean is accepted, never the string 'true'."""

    kind: Literal["boolean"] = "boolean"
    value: StrictBool


class NumberAnswer(BaseModel):
    """Numeric answer (revenue, headcount, ...)."""

    kind: Literal["number"] = "number"
    value: float = Field(..., allow_inf_nan=False)

    @field_validator("value", mode="before")
    @classmethod
    def reject_non_numbers(cls, value):
        if isinstance(value, (bool, str)):
            raise ValueError("Answer must be a number")
        return value


class ChoiceAnswer(BaseModel):
    """Selected option of a multiple choice question."""

    kind: Literal["multiple_choice"] = "multiple_choice"
    value: StrictStr


AnswerValue = Annotated[
    Union[BooleanAnswer, NumberAnswer, ChoiceAnswer],
    Field(discriminator="kind"),
]

answer_value_adapter = TypeAdapter(AnswerValue)


class AnswerSubmit(BaseModel):
    """
    Raw answer posted by the evaluation form.
    Converted to the tagged variant of the owning question's type.
    """

    value: Union[StrictBool, float, StrictStr] = Field(
        ...,
        description="true/false, a number, or the selected option"
    )


class AccountAnswer(BaseModel):
    """
    Answer of one account to one question.
    At most one per (account_id, question_id).
    """

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique answer identifier"
    )

    account_id: UUID = Field(..., description="Foreign key reference to Account")
    question_id: UUID = Field(..., description="Foreign key reference to Question")

    answer: AnswerValue = Field(..., description="Tagged answer value")

    owner_id: str = Field(
        default="current_user",
        description="Owner of the wizard session"
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Record creation timestamp"
    )

    model_config = {"from_attributes": True}

    @property
    def value(self) -> Union[bool, float, str]:
        return self.answer.value
