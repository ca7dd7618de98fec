from datetime import datetime, timezone
from typing import Dict, Any, List, Optional
from fastapi import HTTPException, status
from pymongo import ReturnDocument
from core import database
from core.serialization import insert_result, parse_object_id, serialize_doc, serialize_docs
from models import MEDICINES
import logging

logger = logging.getLogger(__name__)

class MedicineService:
    @staticmethod
    def _get_collection():
        return database.get_database()[MEDICINES]

    @classmethod
    def create_medicine(cls, medicine_data: Dict[str, Any]) -> Dict[str, Any]:
        if not medicine_data.get("name") or medicine_data.get("price") is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Medicine name and price are required"
            )

        if medicine_data.get("stock") is None:
            medicine_data["stock"] = 0
        medicine_data["createdAt"] = datetime.now(timezone.utc)

        result = cls._get_collection().insert_one(medicine_data)
        return insert_result(result)

    @classmethod
    def list_medicines(cls, category: Optional[str] = None) -> List[Dict[str, Any]]:
        filt = {"category": category} if category else {}
        return serialize_docs(cls._get_collection().find(filt))

    @classmethod
    def get_medicine_by_id(cls, medicine_id: str) -> Dict[str, Any]:
        medicine = cls._get_collection().find_one({"_id": parse_object_id(medicine_id)})
        if not medicine:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Medicine not found")
        return serialize_doc(medicine)

    @classmethod
    def restock(cls, medicine_id: str, quantity: int) -> Dict[str, Any]:
        medicine = cls._get_collection().find_one_and_update(
            {"_id": parse_object_id(medicine_id)},
            {"$inc": {"stock": quantity}},
            return_document=ReturnDocument.AFTER
        )
        if not medicine:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Medicine not found")
        logger.info(f"Restocked medicine {medicine_id} by {quantity}, now {medicine.get('stock')}")
        return {"success": True, "message": "Stock updated", "stock": medicine.get("stock")}
