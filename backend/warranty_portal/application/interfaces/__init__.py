from .session_store import SessionStore
from .product_repository import ProductRepository
from .service_record_repository import ServiceRecordRepository

__all__ = [
    "SessionStore",
    "ProductRepository",
    "ServiceRecordRepository",
]
