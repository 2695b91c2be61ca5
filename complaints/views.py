from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.db import transaction
from core.constants import ComplaintStatus
from .models import Complaint
from .serializers import ComplaintSerializer
from api.permissions import IsAdminOrTenant, IsPGAdmin, IsTenant, is_pg_admin, get_tenant


class ComplaintViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Complaint management
    Tenants raise and see their own complaints, the admin sees and resolves all
    """
    permission_classes = [IsAuthenticated, IsAdminOrTenant]
    serializer_class = ComplaintSerializer
    http_method_names = ['get', 'post', 'patch', 'head', 'options']

    def get_permissions(self):
        if self.action == 'create':
            return [IsAuthenticated(), IsTenant()]
        if self.action in ('partial_update', 'resolve'):
            return [IsAuthenticated(), IsPGAdmin()]
        return super().get_permissions()

    def get_queryset(self):
        queryset = Complaint.objects.select_related('tenant')

        if not is_pg_admin(self.request.user):
            tenant = get_tenant(self.request.user)
            return queryset.filter(tenant=tenant) if tenant else queryset.none()

        status_filter = self.request.query_params.get('status', None)
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        return queryset

    def perform_create(self, serializer):
        tenant = get_tenant(self.request.user)
        serializer.save(tenant=tenant, room_no=tenant.room_no or '', status=ComplaintStatus.OPEN)

    @transaction.atomic
    @action(detail=True, methods=['post'])
    def resolve(self, request, pk=None):
        """Mark complaint as resolved with row-level locking"""
        complaint = Complaint.objects.select_for_update().filter(id=pk).first()

        if not complaint:
            return Response(
                {'detail': 'Complaint not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        complaint.status = ComplaintStatus.RESOLVED
        complaint.save()  # Auto-sets resolved_at

        serializer = self.get_serializer(complaint)
        return Response(serializer.data)
