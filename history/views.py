from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from .serializers import PastTenantSerializer
from .services import ArchiveService
from api.permissions import IsPGAdmin


class PastTenantViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for the tenant history archive
    Records are created by tenant checkout only
    """
    permission_classes = [IsAuthenticated, IsPGAdmin]
    serializer_class = PastTenantSerializer
    search_fields = ['name', 'email', 'phone', 'room_no']
    ordering_fields = ['left_at', 'joined_at', 'name']
    ordering = ['-left_at']

    def get_queryset(self):
        return ArchiveService().list_history()
