from .login_service import LoginService
from .product_service import ProductService
from .service_history_service import ServiceHistoryService
from .warranty_registration_service import WarrantyRegistration, WarrantyRegistrationService
from .photo_preview_service import PhotoPreview, PhotoPreviewService
from .service_request_service import PhotoUpload, ServiceRequestService, ServiceRequestSubmission
from .profile_service import ProfileService, ProfileUpdate

__all__ = [
    "LoginService",
    "ProductService",
    "ServiceHistoryService",
    "WarrantyRegistration",
    "WarrantyRegistrationService",
    "PhotoPreview",
    "PhotoPreviewService",
    "PhotoUpload",
    "ServiceRequestService",
    "ServiceRequestSubmission",
    "ProfileService",
    "ProfileUpdate",
]
