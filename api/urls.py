"""
API URLs for the PG manager
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from rooms.views import RoomViewSet
from tenants.views import TenantViewSet
from billing.views import BillViewSet
from rent.views import RentProofViewSet
from history.views import PastTenantViewSet
from complaints.views import ComplaintViewSet
from notices.views import NoticeViewSet
from payments.views import CreateOrderView, VerifyPaymentView

# Create router
router = DefaultRouter()
router.register(r'rooms', RoomViewSet, basename='room')
router.register(r'tenants', TenantViewSet, basename='tenant')
router.register(r'bills', BillViewSet, basename='bill')
router.register(r'rent', RentProofViewSet, basename='rent')
router.register(r'history', PastTenantViewSet, basename='history')
router.register(r'complaints', ComplaintViewSet, basename='complaint')
router.register(r'notices', NoticeViewSet, basename='notice')

urlpatterns = [
    # JWT Authentication
    path('auth/login/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('auth/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # Online payments
    path('payments/create-order/', CreateOrderView.as_view(), name='payment-create-order'),
    path('payments/verify/', VerifyPaymentView.as_view(), name='payment-verify'),

    # API routes
    path('', include(router.urls)),
]
