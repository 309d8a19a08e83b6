"""
Core Package - Account Tiering
account_tiering/core/__init__.py

Core infrastructure: dependencies, exceptions.
"""

from account_tiering.core.dependencies import (
    get_scoring_engine,
    get_session,
    get_session_store,
)
from account_tiering.core.exceptions import (
    AnswerValidationException,
    EntityNotFoundException,
    WizardException,
    WizardStepException,
)

__all__ = [
    # Dependencies
    "get_scoring_engine",
    "get_session",
    "get_session_store",
    # Exceptions
    "AnswerValidationException",
    "EntityNotFoundException",
    "WizardException",
    "WizardStepException",
]
