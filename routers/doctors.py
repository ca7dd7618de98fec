from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from schemas import DoctorCreate
from services.doctor_service import DoctorService
from models import DoctorStatus
from dependencies.auth import verify_admin
import logging

logger = logging.getLogger(__name__)

# Single-doctor lookup lives at /doctor/{id}, so no shared prefix
router = APIRouter(tags=["doctors"])

@router.post("/doctors", response_model=dict)
def register_doctor(doctor: DoctorCreate):
    """Register a doctor; the profile stays pending until an admin approves it"""
    try:
        result = DoctorService.register_doctor(doctor.model_dump(exclude_unset=True))
        return {"success": True, "result": result}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error registering doctor: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.get("/doctors/approved", response_model=List[dict])
def get_approved_doctors():
    try:
        return DoctorService.get_doctors_by_status(DoctorStatus.APPROVED)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching approved doctors: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.get("/doctors/pending", response_model=List[dict], dependencies=[Depends(verify_admin)])
def get_pending_doctors():
    try:
        return DoctorService.get_doctors_by_status(DoctorStatus.PENDING)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching pending doctors: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.patch("/doctors/{doctor_id}/approve", response_model=dict, dependencies=[Depends(verify_admin)])
def approve_doctor(doctor_id: str):
    try:
        result = DoctorService.approve_doctor(doctor_id)
        logger.info(f"Approve doctor {doctor_id}: {result['message']}")
        return result
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error approving doctor {doctor_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.get("/doctor/{doctor_id}", response_model=dict)
def get_doctor(doctor_id: str):
    try:
        return DoctorService.get_doctor_by_id(doctor_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching doctor {doctor_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
