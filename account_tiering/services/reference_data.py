"""
Reference Data - Account Tiering
account_tiering/services/reference_data.py

Fixed choice lists used by the company setup, criteria builder and
account evaluation forms.
"""

from account_tiering.config import settings
from account_tiering.models.enumerations import QuestionType
from account_tiering.models.reference import QuestionTypeInfo, ReferenceData

INDUSTRIES = [
    "Technology",
    "Healthcare",
    "Finance",
    "Manufacturing",
    "Retail",
    "Education",
    "Real Estate",
    "Professional Services",
    "Media & Entertainment",
    "Transportation",
    "Energy",
    "Other",
]

COMPANY_SIZES = [
    "1-10 employees",
    "11-50 employees",
    "51-200 employees",
    "201-500 employees",
    "501-1000 employees",
    "1000+ employees",
]

REVENUE_RANGES = [
    "Under $1M",
    "$1M - $10M",
    "$10M - $50M",
    "$50M - $100M",
    "$100M - $500M",
    "$500M+",
]

QUESTION_TYPES = [
    QuestionTypeInfo(
        value=QuestionType.BOOLEAN,
        label="Yes/No Question",
        description="Simple true/false evaluation",
    ),
    QuestionTypeInfo(
        value=QuestionType.NUMBER,
        label="Numeric Value",
        description="Enter a number (revenue, employees, etc.)",
    ),
    QuestionTypeInfo(
        value=QuestionType.MULTIPLE_CHOICE,
        label="Multiple Choice",
        description="Select from predefined options",
    ),
]

# Starting point of a fresh criteria set
DEFAULT_QUESTION = {
    "text": "Does the company have 500+ employees?",
    "type": QuestionType.BOOLEAN,
    "weight": 8,
}


def get_reference_data() -> ReferenceData:
    return ReferenceData(
        industries=INDUSTRIES,
        company_sizes=COMPANY_SIZES,
        revenue_ranges=REVENUE_RANGES,
        question_types=QUESTION_TYPES,
        min_question_weight=settings.MIN_QUESTION_WEIGHT,
        max_question_weight=settings.MAX_QUESTION_WEIGHT,
        default_question_weight=settings.DEFAULT_QUESTION_WEIGHT,
    )
