from datetime import datetime, timezone
from typing import Dict, Any, List
from fastapi import HTTPException, status
from core import database
from core.serialization import insert_result, parse_object_id, serialize_doc, serialize_docs
from models import DOCTORS, DoctorStatus

class DoctorService:
    @staticmethod
    def _get_collection():
        return database.get_database()[DOCTORS]

    @classmethod
    def register_doctor(cls, doctor_data: Dict[str, Any]) -> Dict[str, Any]:
        """Registers a doctor; every new doctor waits for admin approval"""
        if not doctor_data.get("name"):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Doctor name required")

        doctor_data["status"] = DoctorStatus.PENDING.value
        doctor_data["createdAt"] = datetime.now(timezone.utc)

        result = cls._get_collection().insert_one(doctor_data)
        return insert_result(result)

    @classmethod
    def get_doctors_by_status(cls, doctor_status: DoctorStatus) -> List[Dict[str, Any]]:
        return serialize_docs(cls._get_collection().find({"status": doctor_status.value}))

    @classmethod
    def get_doctor_by_id(cls, doctor_id: str) -> Dict[str, Any]:
        doctor = cls._get_collection().find_one({"_id": parse_object_id(doctor_id)})
        if not doctor:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Doctor not found")
        return serialize_doc(doctor)

    @classmethod
    def approve_doctor(cls, doctor_id: str) -> Dict[str, Any]:
        result = cls._get_collection().update_one(
            {"_id": parse_object_id(doctor_id)},
            {"$set": {"status": DoctorStatus.APPROVED.value}}
        )
        if result.matched_count == 0:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Doctor not found")
        approved = result.modified_count > 0
        return {
            "success": approved,
            "message": "Doctor approved successfully!" if approved else "No changes made"
        }
