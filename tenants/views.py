from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.db import transaction
from core.dto import TenantDTO
from history.serializers import PastTenantSerializer
from history.services import ArchiveService
from .models import Tenant
from .serializers import (
    TenantSerializer, TenantListSerializer, TenantCreateSerializer,
    ChangeRoomSerializer, CheckoutSerializer,
)
from .services import TenantService
from api.permissions import IsPGAdmin, IsTenant, get_tenant


class TenantViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Tenant management
    Onboarding assigns the room, deleting a tenant checks it out into the archive
    """
    permission_classes = [IsAuthenticated, IsPGAdmin]
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_permissions(self):
        if self.action == 'me':
            return [IsAuthenticated(), IsTenant()]
        return super().get_permissions()

    def get_serializer_class(self):
        if self.action == 'list':
            return TenantListSerializer
        return TenantSerializer

    def get_queryset(self):
        queryset = Tenant.objects.select_related('user')

        room_no = self.request.query_params.get('room_no', None)
        if room_no:
            queryset = queryset.filter(room_no=room_no)

        return queryset.order_by('room_no', 'name')

    def create(self, request, *args, **kwargs):
        """Onboard a tenant: login user, tenant record and room assignment"""
        serializer = TenantCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        tenant = TenantService().onboard(TenantDTO(**serializer.validated_data))
        return Response(TenantSerializer(tenant).data, status=status.HTTP_201_CREATED)

    @transaction.atomic
    def partial_update(self, request, *args, **kwargs):
        """Edit contact details with row-level locking; room changes go through change-room"""
        tenant = Tenant.objects.select_for_update().filter(id=kwargs.get('pk')).first()

        if not tenant:
            return Response(
                {'detail': 'Tenant not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        serializer = self.get_serializer(tenant, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    def destroy(self, request, *args, **kwargs):
        """Check the tenant out: archive, free the bed, delete"""
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reason = serializer.validated_data['reason'] or request.query_params.get('reason', '')

        record = ArchiveService().checkout(kwargs.get('pk'), reason=reason)
        return Response(
            {'detail': 'Tenant moved to history', 'history': PastTenantSerializer(record).data},
            status=status.HTTP_200_OK
        )

    @action(detail=True, methods=['post'], url_path='change-room')
    def change_room(self, request, pk=None):
        """Move the tenant to another room"""
        serializer = ChangeRoomSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        tenant = TenantService().change_room(pk, serializer.validated_data['new_room_no'])
        return Response({'detail': 'Room changed successfully', 'tenant': TenantSerializer(tenant).data})

    @action(detail=False, methods=['get'])
    def me(self, request):
        """Profile of the logged-in tenant"""
        serializer = TenantSerializer(get_tenant(request.user))
        return Response(serializer.data)
