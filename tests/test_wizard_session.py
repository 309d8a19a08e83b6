# tests/test_wizard_session.py

"""
Wizard Session Tests - step state, answer validation and recompute-on-change
"""

from uuid import uuid4

import pytest

from account_tiering.core.exceptions import (
    AnswerValidationException,
    EntityNotFoundException,
    WizardStepException,
)
from account_tiering.models.account import AccountCreate
from account_tiering.models.company import CompanyCreate
from account_tiering.models.enumerations import QuestionType, Tier, WizardStep
from account_tiering.models.question import QuestionCreate
from account_tiering.services.session_store import SessionStore
from account_tiering.services.wizard_session import WizardSession, parse_answer



# HELPERS


def _bool_question(text="Has 500+ employees?", weight=5):
    return QuestionCreate(text=text, type=QuestionType.BOOLEAN, weight=weight)


def _choice_question():
    return QuestionCreate(
        text="Company stage?",
        type=QuestionType.MULTIPLE_CHOICE,
        weight=4,
        options=["Seed", "Growth", "Public"],
    )



# STEP 1


class TestCompanySetup:
    def test_set_company_moves_to_criteria(self, session, company_data):
        company = session.set_company(CompanyCreate(**company_data))
        assert company.name == company_data["name"]
        assert session.current_step == WizardStep.CRITERIA_BUILDER

    def test_resubmit_keeps_company_id(self, session, company_data):
        first = session.set_company(CompanyCreate(**company_data))
        company_data["name"] = "Acme Renamed"
        second = session.set_company(CompanyCreate(**company_data))
        assert second.id == first.id
        assert second.name == "Acme Renamed"

    def test_default_question_seeded(self, company_data):
        session = WizardSession(seed_default_question=True)
        session.set_company(CompanyCreate(**company_data))

        [question] = session.questions
        assert question.text == "Does the company have 500+ employees?"
        assert question.type == QuestionType.BOOLEAN
        assert question.weight == 8
        assert question.company_id == session.company.id

    def test_no_seed_when_disabled(self, session, company_data):
        session.set_company(CompanyCreate(**company_data))
        assert session.questions == []



# STEP 2


class TestCriteriaBuilder:
    def test_add_question(self, session):
        question = session.add_question(_bool_question())
        assert session.questions == [question]
        assert question.owner_id == session.owner_id

    def test_update_weight_rescores(self, session):
        q1 = session.add_question(_bool_question(weight=5))
        q2 = session.add_question(_bool_question(text="Uses cloud?", weight=5))
        account = session.add_account(AccountCreate(name="Acme"))
        session.record_answer(account.id, q1.id, True)
        session.record_answer(account.id, q2.id, False)
        assert session.results[0].score.percentage == 50

        session.update_question_weight(q1.id, 10)
        assert session.results[0].score.percentage == 67
        assert session.results[0].score.max_score == 15

    def test_remove_question_drops_its_answers(self, session):
        q1 = session.add_question(_bool_question())
        q2 = session.add_question(_bool_question(text="Uses cloud?"))
        account = session.add_account(AccountCreate(name="Acme"))
        session.record_answer(account.id, q1.id, True)
        session.record_answer(account.id, q2.id, True)

        session.remove_question(q1.id)

        assert [a.question_id for a in session.answers] == [q2.id]
        assert session.results[0].score.max_score == 5

    def test_remove_unknown_question(self, session):
        with pytest.raises(EntityNotFoundException):
            session.remove_question(uuid4())

    def test_replace_questions_discards_answers(self, session):
        q = session.add_question(_bool_question())
        account = session.add_account(AccountCreate(name="Acme"))
        session.record_answer(account.id, q.id, True)

        questions = session.replace_questions([_bool_question(text="New?"), _choice_question()])

        assert [q.text for q in questions] == ["New?", "Company stage?"]
        assert session.answers == []



# STEP 3


class TestAccountEvaluation:
    def test_remove_account_drops_its_answers(self, session):
        q = session.add_question(_bool_question())
        keep = session.add_account(AccountCreate(name="Keep"))
        drop = session.add_account(AccountCreate(name="Drop"))
        session.record_answer(keep.id, q.id, True)
        session.record_answer(drop.id, q.id, True)

        session.remove_account(drop.id)

        assert [a.account_id for a in session.answers] == [keep.id]
        assert [r.account.name for r in session.results] == ["Keep"]

    def test_rerecording_replaces_answer(self, session):
        q = session.add_question(_bool_question())
        account = session.add_account(AccountCreate(name="Acme"))
        first = session.record_answer(account.id, q.id, False)
        second = session.record_answer(account.id, q.id, True)

        assert second.id == first.id
        assert len(session.answers) == 1
        assert session.results[0].score.tier == Tier.A

    def test_clear_answer(self, session):
        q = session.add_question(_bool_question())
        account = session.add_account(AccountCreate(name="Acme"))
        session.record_answer(account.id, q.id, True)

        session.clear_answer(account.id, q.id)

        assert session.answers == []
        assert session.results[0].score.percentage == 0
        with pytest.raises(EntityNotFoundException):
            session.clear_answer(account.id, q.id)

    def test_answer_for_unknown_account(self, session):
        q = session.add_question(_bool_question())
        with pytest.raises(EntityNotFoundException):
            session.record_answer(uuid4(), q.id, True)

    def test_completion_status(self, session):
        q1 = session.add_question(_bool_question())
        q2 = session.add_question(_choice_question())
        a1 = session.add_account(AccountCreate(name="One"))
        session.add_account(AccountCreate(name="Two"))
        session.record_answer(a1.id, q1.id, True)
        session.record_answer(a1.id, q2.id, "Seed")

        status = session.completion_status()
        assert (status.answered, status.total) == (2, 4)
        assert status.is_complete is False

    def test_results_recomputed_on_every_mutation(self, session):
        q = session.add_question(_bool_question())
        assert session.results == []

        account = session.add_account(AccountCreate(name="Acme"))
        assert session.results[0].score.percentage == 0

        session.record_answer(account.id, q.id, True)
        assert session.results[0].score.percentage == 100

        session.add_question(_bool_question(text="Second?", weight=5))
        assert session.results[0].score.percentage == 50



# ANSWER VALIDATION


class TestParseAnswer:
    """Answers must match the owning question's type."""

    @pytest.fixture
    def questions(self, session):
        return {
            QuestionType.BOOLEAN: session.add_question(_bool_question()),
            QuestionType.NUMBER: session.add_question(
                QuestionCreate(text="Revenue ($M)?", type=QuestionType.NUMBER, weight=3)
            ),
            QuestionType.MULTIPLE_CHOICE: session.add_question(_choice_question()),
        }

    @pytest.mark.parametrize("qtype,raw", [
        (QuestionType.BOOLEAN, "true"),
        (QuestionType.BOOLEAN, 1),
        (QuestionType.NUMBER, True),
        (QuestionType.NUMBER, "12"),
        (QuestionType.MULTIPLE_CHOICE, 3),
        (QuestionType.MULTIPLE_CHOICE, "Enterprise"),
        (QuestionType.MULTIPLE_CHOICE, ""),
    ])
    def test_mismatched_answer_rejected(self, questions, qtype, raw):
        with pytest.raises(AnswerValidationException):
            parse_answer(questions[qtype], raw)

    @pytest.mark.parametrize("qtype,raw", [
        (QuestionType.BOOLEAN, False),
        (QuestionType.NUMBER, 0),
        (QuestionType.NUMBER, 12.5),
        (QuestionType.MULTIPLE_CHOICE, "Growth"),
    ])
    def test_matching_answer_accepted(self, questions, qtype, raw):
        value = parse_answer(questions[qtype], raw)
        assert value.kind == qtype.value
        assert value.value == raw



# NAVIGATION


class TestNavigation:
    def test_cannot_skip_company(self, session):
        with pytest.raises(WizardStepException):
            session.advance()

    def test_cannot_leave_criteria_without_questions(self, session, company_data):
        session.set_company(CompanyCreate(**company_data))
        with pytest.raises(WizardStepException):
            session.advance()

    def test_results_require_every_answer(self, session, company_data):
        session.set_company(CompanyCreate(**company_data))
        q = session.add_question(_bool_question())
        assert session.advance() == WizardStep.ACCOUNT_EVALUATION

        with pytest.raises(WizardStepException):
            session.advance()

        account = session.add_account(AccountCreate(name="Acme"))
        with pytest.raises(WizardStepException):
            session.advance()

        session.record_answer(account.id, q.id, False)
        assert session.advance() == WizardStep.RESULTS

        with pytest.raises(WizardStepException):
            session.advance()

    def test_back_stops_at_first_step(self, session, company_data):
        session.set_company(CompanyCreate(**company_data))
        assert session.back() == WizardStep.COMPANY_SETUP
        assert session.back() == WizardStep.COMPANY_SETUP

    def test_start_over(self, session, company_data):
        session.set_company(CompanyCreate(**company_data))
        q = session.add_question(_bool_question())
        account = session.add_account(AccountCreate(name="Acme"))
        session.record_answer(account.id, q.id, True)

        session.start_over()

        assert session.current_step == WizardStep.COMPANY_SETUP
        assert session.company is None
        assert session.questions == []
        assert session.accounts == []
        assert session.answers == []
        assert session.results == []



# SESSION STORE


class TestSessionStore:
    def test_create_get_delete(self):
        store = SessionStore(max_sessions=5)
        session = store.create(owner_id="owner-1")

        assert store.get(session.id) is session
        assert session.owner_id == "owner-1"
        assert len(store) == 1

        store.delete(session.id)
        with pytest.raises(EntityNotFoundException):
            store.get(session.id)
        with pytest.raises(EntityNotFoundException):
            store.delete(session.id)

    def test_oldest_session_evicted(self):
        store = SessionStore(max_sessions=2)
        first = store.create()
        second = store.create()
        third = store.create()

        assert len(store) == 2
        with pytest.raises(EntityNotFoundException):
            store.get(first.id)
        assert store.get(second.id) is second
        assert store.get(third.id) is third
