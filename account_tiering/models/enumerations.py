from enum import Enum

class QuestionType(str, Enum):
    BOOLEAN = "boolean"                  # Yes / No
    NUMBER = "number"                    # Revenue, employees, etc.
    MULTIPLE_CHOICE = "multiple_choice"  # Select from predefined options

class Tier(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"

class WizardStep(int, Enum):
    COMPANY_SETUP = 1
    CRITERIA_BUILDER = 2
    ACCOUNT_EVALUATION = 3
    RESULTS = 4
