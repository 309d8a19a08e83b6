"""
Reference Data Router - Account Tiering
account_tiering/routers/reference.py

Choice lists for the wizard forms.
"""

from fastapi import APIRouter

from account_tiering.config import settings
from account_tiering.models.reference import ReferenceData
from account_tiering.services.reference_data import get_reference_data

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Reference"])


@router.get(
    "/reference",
    response_model=ReferenceData,
    summary="Form choices",
    description="Industries, company sizes, revenue ranges, question types and weight bounds.",
)
async def reference_data() -> ReferenceData:
    return get_reference_data()
