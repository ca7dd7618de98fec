from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from schemas import UserCreate, UserRoleUpdate
from services.user_service import UserService
from dependencies.auth import verify_admin
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

@router.post("", response_model=dict)
def register_user(user: UserCreate):
    """Register a user; role defaults to 'user'"""
    try:
        result = UserService.register_user(user.model_dump(exclude_unset=True))
        return {"success": True, "result": result}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error registering user: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.get("", response_model=List[dict], dependencies=[Depends(verify_admin)])
def list_users():
    try:
        return UserService.list_users()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error listing users: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.get("/{email}", response_model=dict)
def get_user(email: str):
    try:
        return UserService.get_user(email)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching user {email}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.patch("/{email}/role", response_model=dict, dependencies=[Depends(verify_admin)])
def update_user_role(email: str, payload: UserRoleUpdate):
    """Promote or demote a user (admin only)"""
    try:
        return UserService.update_role(email, payload.role)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating role for {email}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
