# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and data for models, engine and APIs
"""

import pytest
from fastapi.testclient import TestClient

from account_tiering.main import app
from account_tiering.models.account import Account
from account_tiering.models.answer import AccountAnswer
from account_tiering.models.enumerations import QuestionType
from account_tiering.models.question import Question
from account_tiering.services.wizard_session import WizardSession


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# ENGINE INPUT FACTORIES
# =============================================================================

@pytest.fixture
def make_question():
    """Build a Question; the engine accepts any weight."""
    def _make(weight=5, type=QuestionType.BOOLEAN, text="Qualifies?", options=None):
        if type == QuestionType.MULTIPLE_CHOICE and options is None:
            options = ["Small", "Medium", "Large"]
        return Question(text=text, type=type, weight=weight, options=options)
    return _make


@pytest.fixture
def make_account():
    def _make(name="Acme Corp", industry="Technology"):
        return Account(name=name, industry=industry)
    return _make


@pytest.fixture
def make_answer():
    """Build an AccountAnswer tagged with the question type unless ``kind`` is given."""
    def _make(account, question, value, kind=None):
        return AccountAnswer(
            account_id=account.id,
            question_id=question.id,
            answer={"kind": kind or question.type.value, "value": value},
        )
    return _make


# =============================================================================
# WIZARD FIXTURES
# =============================================================================

@pytest.fixture
def company_data():
    """Valid step 1 payload."""
    return {
        "name": "Acme Software Solutions",
        "description": "B2B workflow automation",
        "industry": "Technology",
        "target_market": "Mid-market manufacturers",
    }


@pytest.fixture
def session():
    """Fresh wizard session without the seeded default question."""
    return WizardSession(seed_default_question=False)
