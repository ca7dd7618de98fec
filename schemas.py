from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator
from typing import Any, Optional, Union
from models import UserRole, AppointmentStatus

# Request bodies are passed through to MongoDB, so unknown fields are kept.
# Required fields are Optional here and checked in the services, which
# answer with the portal's own 400 messages.
class PortalDocument(BaseModel):
    model_config = ConfigDict(extra="allow", use_enum_values=True)

# User Schemas
class UserCreate(PortalDocument):
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[UserRole] = None

class UserRoleUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    role: UserRole

# Doctor Schemas
class DoctorCreate(PortalDocument):
    name: Optional[str] = None
    specialty: Optional[str] = None
    email: Optional[str] = None

# Appointment Schemas
class AppointmentCreate(PortalDocument):
    userId: Optional[Union[str, int]] = None
    doctorId: Optional[Union[str, int]] = None
    doctorName: Optional[str] = None
    appointmentDate: Optional[str] = None
    status: Optional[AppointmentStatus] = None

class AppointmentStatusUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: AppointmentStatus

# Medicine Schemas
class MedicineCreate(PortalDocument):
    name: Optional[str] = None
    category: Optional[str] = None
    price: Optional[Union[StrictInt, StrictFloat]] = None
    stock: Optional[StrictInt] = Field(None, ge=0)
    description: Optional[str] = None
    image: Optional[str] = None

    @field_validator('price')
    @classmethod
    def validate_price(cls, v):
        if v is not None and v < 0:
            raise ValueError('Price must not be negative')
        return v

class StockUpdate(BaseModel):
    quantity: StrictInt = Field(..., ge=1)

# Order Schemas
class OrderCreate(PortalDocument):
    userId: Optional[Union[str, int]] = None
    medicineId: Optional[str] = None
    # Left uncoerced: OrderService.place_order rejects anything but a positive int
    quantity: Optional[Any] = None
