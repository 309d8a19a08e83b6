from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime
from typing import List, Optional

from account_tiering.models.account import Account
from account_tiering.models.answer import AccountAnswer
from account_tiering.models.company import Company
from account_tiering.models.enumerations import WizardStep
from account_tiering.models.evaluation import CompletionStatus
from account_tiering.models.question import Question


class SessionCreate(BaseModel):
    """
    Model for starting a wizard session.
    """

    owner_id: str = Field(default="current_user", min_length=1, max_length=255)


class SessionState(BaseModel):
    """
    Snapshot of a wizard session returned by the API.
    """

    id: UUID
    owner_id: str
    created_at: datetime
    current_step: WizardStep
    company: Optional[Company] = None
    questions: List[Question]
    accounts: List[Account]
    answers: List[AccountAnswer]
    completion: CompletionStatus
