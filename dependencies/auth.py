from fastapi import Header, HTTPException, status
from core.config import settings
from typing import Optional
import logging

logger = logging.getLogger(__name__)

async def verify_admin(role: Optional[str] = Header(None)):
    """Header-based admin check: the request must carry `role: admin`.

    This is a plain string comparison, not authentication.
    """
    if role != settings.ADMIN_ROLE_VALUE:
        logger.debug(f"Admin route refused for role header {role!r}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied! Admin only."
        )
    return role
