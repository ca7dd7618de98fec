"""
Helpers for moving documents between MongoDB and JSON responses
"""
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
from bson import ObjectId
from fastapi import HTTPException, status


def parse_object_id(value: str) -> ObjectId:
    """Convert a path/body id into an ObjectId, 400 when malformed"""
    if not ObjectId.is_valid(value):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid id")
    return ObjectId(value)


def _serialize_value(v: Any) -> Any:
    if isinstance(v, ObjectId):
        return str(v)
    if isinstance(v, datetime):
        return v.isoformat()
    if isinstance(v, dict):
        return {k: _serialize_value(item) for k, item in v.items()}
    if isinstance(v, (list, tuple)):
        return [_serialize_value(item) for item in v]
    return v


def serialize_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not doc:
        return doc
    return _serialize_value(doc)


def serialize_docs(docs: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_doc(d) for d in docs]


def insert_result(result) -> Dict[str, Any]:
    # Same shape the portal frontend reads from an insert acknowledgement
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}
