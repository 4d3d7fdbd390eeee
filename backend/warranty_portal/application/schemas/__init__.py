from .common import (
    Notification,
    ScreenResponse,
    FormErrorResponse,
    NotFoundResponse,
    ProductOption,
)
from .role import RoleOption, RoleSelectionView, RoleSelectRequest
from .login import LoginView, SendOtpRequest, VerifyOtpRequest
from .dashboard import QuickAction, ProductSummary, EmptyState, DashboardView
from .product import (
    WarrantyDetails,
    CustomerDetails,
    ProductAction,
    ProductDetailView,
    CustomerPhoneUpdateRequest,
)
from .warranty import RegisterWarrantyView, RegisterWarrantyRequest
from .service_request import ServiceRequestView, PhotoPreviewResponse
from .service_history import ServiceRecordView, ServiceHistoryView
from .profile import ProfileFields, ProfileView, ProfileUpdateRequest

__all__ = [
    "Notification",
    "ScreenResponse",
    "FormErrorResponse",
    "NotFoundResponse",
    "ProductOption",
    "RoleOption",
    "RoleSelectionView",
    "RoleSelectRequest",
    "LoginView",
    "SendOtpRequest",
    "VerifyOtpRequest",
    "QuickAction",
    "ProductSummary",
    "EmptyState",
    "DashboardView",
    "WarrantyDetails",
    "CustomerDetails",
    "ProductAction",
    "ProductDetailView",
    "CustomerPhoneUpdateRequest",
    "RegisterWarrantyView",
    "RegisterWarrantyRequest",
    "ServiceRequestView",
    "PhotoPreviewResponse",
    "ServiceRecordView",
    "ServiceHistoryView",
    "ProfileFields",
    "ProfileView",
    "ProfileUpdateRequest",
]
