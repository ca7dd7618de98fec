from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from schemas import AppointmentCreate, AppointmentStatusUpdate
from services.appointment_service import AppointmentService
from dependencies.auth import verify_admin
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["appointments"])

@router.post("", response_model=dict)
def create_appointment(appointment: AppointmentCreate):
    """Book an appointment. Expected body: { userId, doctorId, doctorName, appointmentDate, ... }"""
    try:
        result = AppointmentService.create_appointment(appointment.model_dump(exclude_unset=True))
        return {"success": True, "result": result}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error booking appointment: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.get("/user/{user_id}", response_model=List[dict])
def get_user_appointments(user_id: str):
    try:
        return AppointmentService.get_user_appointments(user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching appointments for user {user_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.get("/doctor/{doctor_id}", response_model=List[dict])
def get_doctor_appointments(doctor_id: str):
    try:
        return AppointmentService.get_doctor_appointments(doctor_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching appointments for doctor {doctor_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.get("", response_model=List[dict], dependencies=[Depends(verify_admin)])
def get_all_appointments():
    try:
        return AppointmentService.get_all_appointments()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching appointments: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.patch("/{appointment_id}/status", response_model=dict, dependencies=[Depends(verify_admin)])
def update_appointment_status(appointment_id: str, payload: AppointmentStatusUpdate):
    try:
        return AppointmentService.update_status(appointment_id, payload.status)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating appointment {appointment_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
