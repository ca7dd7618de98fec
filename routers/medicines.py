from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
from schemas import MedicineCreate, StockUpdate
from services.medicine_service import MedicineService
from dependencies.auth import verify_admin
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/medicines", tags=["medicines"])

@router.post("", response_model=dict, dependencies=[Depends(verify_admin)])
def create_medicine(medicine: MedicineCreate):
    """Add a medicine to the catalog (admin only); stock defaults to 0"""
    try:
        result = MedicineService.create_medicine(medicine.model_dump(exclude_unset=True))
        return {"success": True, "result": result}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating medicine: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.get("", response_model=List[dict])
def list_medicines(category: Optional[str] = Query(None, description="Filter by category")):
    try:
        return MedicineService.list_medicines(category)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error listing medicines: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.get("/{medicine_id}", response_model=dict)
def get_medicine(medicine_id: str):
    try:
        return MedicineService.get_medicine_by_id(medicine_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching medicine {medicine_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.patch("/{medicine_id}/stock", response_model=dict, dependencies=[Depends(verify_admin)])
def restock_medicine(medicine_id: str, payload: StockUpdate):
    try:
        return MedicineService.restock(medicine_id, payload.quantity)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error restocking medicine {medicine_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
