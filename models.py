"""
Model enums for type hints and validation
Note: MongoDB collections are schema-flexible; these enums only pin down
the fields the handlers read or set.
"""
import enum

class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"

class DoctorStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"

class AppointmentStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

class OrderStatus(str, enum.Enum):
    PLACED = "placed"

# Collection names
USERS = "users"
DOCTORS = "doctors"
APPOINTMENTS = "appointments"
MEDICINES = "medicines"
ORDERS = "orders"
