import pytest
from bson import ObjectId
from datetime import datetime, timezone
from httpx import AsyncClient
from unittest.mock import MagicMock

ADMIN_HEADERS = {"role": "admin"}

@pytest.mark.asyncio
async def test_book_appointment_stringifies_ids(async_client: AsyncClient, mock_db):
    appointments = mock_db["appointments"]
    appointments.insert_one.return_value = MagicMock(acknowledged=True, inserted_id=ObjectId())

    response = await async_client.post(
        "/appointments",
        json={"userId": 42, "doctorId": "65f1c0ffee", "doctorName": "Dr. Rahman", "appointmentDate": "2030-01-01"}
    )

    assert response.status_code == 200
    assert response.json()["success"] is True
    stored = appointments.insert_one.call_args.args[0]
    assert stored["userId"] == "42"
    assert stored["doctorId"] == "65f1c0ffee"
    assert stored["status"] == "pending"
    assert stored["doctorName"] == "Dr. Rahman"
    assert isinstance(stored["createdAt"], datetime)

@pytest.mark.asyncio
async def test_book_appointment_keeps_given_status(async_client: AsyncClient, mock_db):
    appointments = mock_db["appointments"]
    appointments.insert_one.return_value = MagicMock(acknowledged=True, inserted_id=ObjectId())

    await async_client.post(
        "/appointments",
        json={"userId": "u1", "doctorId": "d1", "appointmentDate": "2030-01-01", "status": "confirmed"}
    )

    assert appointments.insert_one.call_args.args[0]["status"] == "confirmed"

@pytest.mark.asyncio
async def test_book_appointment_missing_fields(async_client: AsyncClient, mock_db):
    response = await async_client.post("/appointments", json={"userId": "u1", "doctorId": "d1"})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "userId, doctorId and appointmentDate are required"
    }
    mock_db["appointments"].insert_one.assert_not_called()

@pytest.mark.asyncio
async def test_user_appointments(async_client: AsyncClient, mock_db):
    created = datetime(2030, 1, 1, 9, 30, tzinfo=timezone.utc)
    mock_db["appointments"].find.return_value = [
        {"_id": ObjectId(), "userId": "42", "doctorId": "d1", "status": "pending", "createdAt": created}
    ]

    response = await async_client.get("/appointments/user/42")

    assert response.status_code == 200
    assert response.json()[0]["createdAt"] == created.isoformat()
    mock_db["appointments"].find.assert_called_once_with({"userId": "42"})

@pytest.mark.asyncio
async def test_doctor_appointments(async_client: AsyncClient, mock_db):
    mock_db["appointments"].find.return_value = []

    response = await async_client.get("/appointments/doctor/d1")

    assert response.status_code == 200
    mock_db["appointments"].find.assert_called_once_with({"doctorId": "d1"})

@pytest.mark.asyncio
async def test_all_appointments_requires_admin(async_client: AsyncClient, mock_db):
    response = await async_client.get("/appointments")

    assert response.status_code == 403

@pytest.mark.asyncio
async def test_update_appointment_status(async_client: AsyncClient, mock_db):
    oid = ObjectId()
    mock_db["appointments"].update_one.return_value = MagicMock(matched_count=1, modified_count=1)

    response = await async_client.patch(f"/appointments/{oid}/status", json={"status": "confirmed"}, headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json()["success"] is True
    mock_db["appointments"].update_one.assert_called_once_with({"_id": oid}, {"$set": {"status": "confirmed"}})

@pytest.mark.asyncio
async def test_update_appointment_unknown_id(async_client: AsyncClient, mock_db):
    mock_db["appointments"].update_one.return_value = MagicMock(matched_count=0, modified_count=0)

    response = await async_client.patch(f"/appointments/{ObjectId()}/status", json={"status": "cancelled"}, headers=ADMIN_HEADERS)

    assert response.status_code == 404
    assert response.json()["message"] == "Appointment not found"

@pytest.mark.asyncio
async def test_update_appointment_invalid_status(async_client: AsyncClient, mock_db):
    response = await async_client.patch(f"/appointments/{ObjectId()}/status", json={"status": "teleported"}, headers=ADMIN_HEADERS)

    assert response.status_code == 400
    mock_db["appointments"].update_one.assert_not_called()

@pytest.mark.asyncio
async def test_all_appointments_admin(async_client: AsyncClient, mock_db):
    oid = ObjectId()
    mock_db["appointments"].find.return_value = [{"_id": oid, "userId": "u1", "doctorId": "d1", "status": "pending"}]

    response = await async_client.get("/appointments", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == [{"_id": str(oid), "userId": "u1", "doctorId": "d1", "status": "pending"}]
    mock_db["appointments"].find.assert_called_once_with()

@pytest.mark.asyncio
async def test_update_appointment_malformed_id(async_client: AsyncClient, mock_db):
    response = await async_client.patch("/appointments/abc/status", json={"status": "confirmed"}, headers=ADMIN_HEADERS)

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid id"
    mock_db["appointments"].update_one.assert_not_called()
