"""
Verification endpoints for API v1.

Lists the users a "ready for verification" notice was sent to.  Kept
apart from the users router so that no user name can shadow it.
"""

from typing import List

from fastapi import APIRouter, Depends

from user_verification_api.app.api.v1.endpoints.users import get_outbox
from user_verification_api.app.services.notification_service import VerificationOutbox


router = APIRouter()


@router.get("/pending", response_model=List[str])
def list_pending_verifications(outbox: VerificationOutbox = Depends(get_outbox)) -> List[str]:
    """Names of users a verification request was sent to, oldest first."""
    return outbox.pending()
