import pytest
from bson import ObjectId
from datetime import datetime, timezone
from fastapi import HTTPException
from core.serialization import parse_object_id, serialize_doc

def test_serialize_doc_converts_nested_values():
    oid, nested_oid = ObjectId(), ObjectId()
    when = datetime(2030, 1, 1, tzinfo=timezone.utc)
    doc = {
        "_id": oid,
        "history": [{"by": nested_oid, "at": when}],
        "meta": {"reviewedAt": when, "tags": ["a", "b"]},
    }

    assert serialize_doc(doc) == {
        "_id": str(oid),
        "history": [{"by": str(nested_oid), "at": when.isoformat()}],
        "meta": {"reviewedAt": when.isoformat(), "tags": ["a", "b"]},
    }

def test_serialize_doc_passes_through_empty():
    assert serialize_doc(None) is None
    assert serialize_doc({}) == {}

def test_parse_object_id_rejects_malformed():
    with pytest.raises(HTTPException) as exc_info:
        parse_object_id("nope")
    assert exc_info.value.status_code == 400
