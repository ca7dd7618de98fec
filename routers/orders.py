from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from schemas import OrderCreate
from services.order_service import OrderService
from dependencies.auth import verify_admin
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])

@router.post("", response_model=dict)
def place_order(order: OrderCreate):
    """Place an order: decrement stock if enough is left, then record the order
    with the medicine's current price"""
    try:
        return OrderService.place_order(order.model_dump(exclude_unset=True))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error placing order: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.get("/user/{user_id}", response_model=List[dict])
def get_user_orders(user_id: str):
    try:
        return OrderService.get_user_orders(user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching orders for user {user_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

@router.get("", response_model=List[dict], dependencies=[Depends(verify_admin)])
def get_all_orders():
    try:
        return OrderService.get_all_orders()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching orders: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
