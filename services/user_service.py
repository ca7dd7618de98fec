from typing import Dict, Any, List, Optional
from fastapi import HTTPException, status
from core import database
from core.serialization import insert_result, serialize_doc, serialize_docs
from models import USERS, UserRole
import logging

logger = logging.getLogger(__name__)

class UserService:
    @staticmethod
    def _get_collection():
        return database.get_database()[USERS]

    @classmethod
    def get_user_by_email(cls, email: str) -> Optional[Dict[str, Any]]:
        return cls._get_collection().find_one({"email": email})

    @classmethod
    def register_user(cls, user_data: Dict[str, Any]) -> Dict[str, Any]:
        if not user_data.get("email"):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email required")

        user_data["role"] = user_data.get("role") or UserRole.USER.value

        # Uniqueness is a lookup, not an index
        if cls.get_user_by_email(user_data["email"]):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

        result = cls._get_collection().insert_one(user_data)
        logger.info(f"Registered user {user_data['email']} with role {user_data['role']}")
        return insert_result(result)

    @classmethod
    def get_user(cls, email: str) -> Dict[str, Any]:
        user = cls.get_user_by_email(email)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return serialize_doc(user)

    @classmethod
    def list_users(cls) -> List[Dict[str, Any]]:
        return serialize_docs(cls._get_collection().find())

    @classmethod
    def update_role(cls, email: str, role: str) -> Dict[str, Any]:
        result = cls._get_collection().update_one({"email": email}, {"$set": {"role": role}})
        if result.matched_count == 0:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        if result.modified_count == 0:
            return {"success": False, "message": "No changes made"}
        return {"success": True, "message": f"Role updated to {role}"}
