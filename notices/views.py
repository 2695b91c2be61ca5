from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from .models import Notice
from .serializers import NoticeSerializer
from api.permissions import IsPGAdmin


class NoticeViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the notice board
    Everyone logged in reads notices, only the admin writes them
    """
    permission_classes = [IsAuthenticated]
    serializer_class = NoticeSerializer
    queryset = Notice.objects.select_related('created_by').order_by('-created_at', '-id')

    def get_permissions(self):
        if self.action in ('create', 'update', 'partial_update', 'destroy'):
            return [IsAuthenticated(), IsPGAdmin()]
        return super().get_permissions()

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)
