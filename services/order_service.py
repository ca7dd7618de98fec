from datetime import datetime, timezone
from typing import Dict, Any, List
from fastapi import HTTPException, status
from pymongo import DESCENDING, ReturnDocument
from core import database
from core.serialization import insert_result, parse_object_id, serialize_doc, serialize_docs
from models import MEDICINES, ORDERS, OrderStatus
import logging

logger = logging.getLogger(__name__)

class OrderService:
    @staticmethod
    def _get_db():
        return database.get_database()

    @classmethod
    def place_order(cls, order_data: Dict[str, Any]) -> Dict[str, Any]:
        """Reserve stock with one guarded decrement, then record the order.

        The two writes are not atomic together: if the process dies after the
        decrement, stock is reduced with no order recorded.
        """
        if not order_data.get("userId") or not order_data.get("medicineId") or order_data.get("quantity") is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="userId, medicineId and quantity are required"
            )

        quantity = order_data["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Quantity must be a positive integer"
            )

        medicine_oid = parse_object_id(str(order_data["medicineId"]))
        db = cls._get_db()

        medicine = db[MEDICINES].find_one_and_update(
            {"_id": medicine_oid, "stock": {"$gte": quantity}},
            {"$inc": {"stock": -quantity}},
            return_document=ReturnDocument.AFTER
        )
        if not medicine:
            if not db[MEDICINES].find_one({"_id": medicine_oid}, {"_id": 1}):
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Medicine not found")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Insufficient stock")

        # Price comes from the document returned by the decrement itself
        price = medicine.get("price", 0)
        order_record = {
            **order_data,
            "userId": str(order_data["userId"]),
            "medicineId": str(medicine_oid),
            "quantity": quantity,
            "pricePerUnit": price,
            "totalPrice": price * quantity,
            "status": OrderStatus.PLACED.value,
            "createdAt": datetime.now(timezone.utc),
        }

        result = db[ORDERS].insert_one(order_record)
        logger.info(
            f"Order placed: user={order_record['userId']} medicine={order_record['medicineId']} "
            f"qty={quantity} remaining_stock={medicine.get('stock')}"
        )
        order_record["_id"] = result.inserted_id
        return {"success": True, "result": insert_result(result), "order": serialize_doc(order_record)}

    @classmethod
    def get_user_orders(cls, user_id: str) -> List[Dict[str, Any]]:
        cursor = cls._get_db()[ORDERS].find({"userId": str(user_id)}).sort("createdAt", DESCENDING)
        return serialize_docs(cursor)

    @classmethod
    def get_all_orders(cls) -> List[Dict[str, Any]]:
        return serialize_docs(cls._get_db()[ORDERS].find().sort("createdAt", DESCENDING))
