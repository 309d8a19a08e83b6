"""
Services module for the Account Tiering service.
"""

from account_tiering.services.export import export_results_csv
from account_tiering.services.report import build_report, tier_counts
from account_tiering.services.session_store import SessionStore
from account_tiering.services.wizard_session import WizardSession, parse_answer

__all__ = [
    "export_results_csv",
    "build_report",
    "tier_counts",
    "SessionStore",
    "WizardSession",
    "parse_answer",
]
