from .session import Role, LoginStage, Session
from .product import Product, WarrantyStatus
from .service_record import ServiceRecord, ServiceStatus
from .profile import UserProfile

__all__ = [
    "Role",
    "LoginStage",
    "Session",
    "Product",
    "WarrantyStatus",
    "ServiceRecord",
    "ServiceStatus",
    "UserProfile",
]
