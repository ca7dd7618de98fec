from datetime import datetime, timezone
from typing import Dict, Any, List
from fastapi import HTTPException, status
from core import database
from core.serialization import insert_result, parse_object_id, serialize_docs
from models import APPOINTMENTS, AppointmentStatus

class AppointmentService:
    @staticmethod
    def _get_collection():
        return database.get_database()[APPOINTMENTS]

    @classmethod
    def create_appointment(cls, appointment_data: Dict[str, Any]) -> Dict[str, Any]:
        if not (appointment_data.get("userId") and appointment_data.get("doctorId")
                and appointment_data.get("appointmentDate")):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="userId, doctorId and appointmentDate are required"
            )

        # Ids are stored as strings so lookups by path parameter match
        appointment_record = {
            **appointment_data,
            "userId": str(appointment_data["userId"]),
            "doctorId": str(appointment_data["doctorId"]),
            "status": appointment_data.get("status") or AppointmentStatus.PENDING.value,
            "createdAt": datetime.now(timezone.utc),
        }

        result = cls._get_collection().insert_one(appointment_record)
        return insert_result(result)

    @classmethod
    def get_user_appointments(cls, user_id: str) -> List[Dict[str, Any]]:
        return serialize_docs(cls._get_collection().find({"userId": str(user_id)}))

    @classmethod
    def get_doctor_appointments(cls, doctor_id: str) -> List[Dict[str, Any]]:
        return serialize_docs(cls._get_collection().find({"doctorId": str(doctor_id)}))

    @classmethod
    def get_all_appointments(cls) -> List[Dict[str, Any]]:
        return serialize_docs(cls._get_collection().find())

    @classmethod
    def update_status(cls, appointment_id: str, new_status: str) -> Dict[str, Any]:
        result = cls._get_collection().update_one(
            {"_id": parse_object_id(appointment_id)},
            {"$set": {"status": new_status}}
        )
        if result.matched_count == 0:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Appointment not found")
        changed = result.modified_count > 0
        return {
            "success": changed,
            "message": f"Appointment marked {new_status}" if changed else "No changes made"
        }
