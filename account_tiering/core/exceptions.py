"""
Custom Exceptions - Account Tiering
account_tiering/core/exceptions.py

Exceptions raised at the wizard boundary. The scoring engine raises none.
"""


class WizardException(Exception):
    """Base exception for wizard session operations."""

    pass


class EntityNotFoundException(WizardException):
    """Session, question, account or answer not found."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class AnswerValidationException(WizardException):
    """Answer does not fit the type or options of its question."""

    def __init__(self, question_id: str, message: str):
        self.question_id = question_id
        self.message = message
        super().__init__(message)


class WizardStepException(WizardException):
    """Step requirement not met (e.g. advancing with no questions)."""

    def __init__(self, step: int, message: str):
        self.step = step
        self.message = message
        super().__init__(message)
