from pydantic import BaseModel
from typing import List

from account_tiering.models.enumerations import QuestionType


class QuestionTypeInfo(BaseModel):
    value: QuestionType
    label: str
    description: str


class ReferenceData(BaseModel):
    """
    Choices offered by the wizard forms.
    """

    industries: List[str]
    company_sizes: List[str]
    revenue_ranges: List[str]
    question_types: List[QuestionTypeInfo]
    min_question_weight: float
    max_question_weight: float
    default_question_weight: float
