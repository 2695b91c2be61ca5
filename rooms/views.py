from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from .models import Room
from .serializers import RoomSerializer
from .services import OccupancyService
from api.permissions import IsPGAdmin


class RoomViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for Room management
    Rooms are created by the seed action and never deleted
    """
    permission_classes = [IsAuthenticated, IsPGAdmin]
    serializer_class = RoomSerializer
    lookup_field = 'room_no'
    search_fields = ['room_no']
    ordering_fields = ['room_no', 'floor', 'occupant_count']
    ordering = ['room_no']

    def get_queryset(self):
        queryset = Room.objects.all()

        status_filter = self.request.query_params.get('status', None)
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        floor = self.request.query_params.get('floor', None)
        if floor and floor.isdigit():
            queryset = queryset.filter(floor=int(floor))

        return queryset

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if self.action == 'list':
            from tenants.models import Tenant
            context['tenant_names'] = dict(Tenant.objects.values_list('id', 'name'))
        return context

    def list(self, request, *args, **kwargs):
        """List rooms after repairing any occupancy drift"""
        OccupancyService().reconcile()
        return super().list(request, *args, **kwargs)

    @action(detail=True, methods=['patch', 'put'])
    def price(self, request, room_no=None):
        """Update the monthly price of a room"""
        room = OccupancyService().update_price(room_no, request.data.get('price'))
        return Response(self.get_serializer(room).data)

    @action(detail=False, methods=['post'])
    def seed(self, request):
        """Create the fixed room layout (idempotent)"""
        created = OccupancyService().seed_rooms()
        return Response(
            {'detail': f'{created} rooms created', 'created': created, 'total': Room.objects.count()},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )

    @action(detail=False, methods=['post'])
    def reconcile(self, request):
        """Standalone occupancy repair pass"""
        corrected = OccupancyService().reconcile()
        return Response({'detail': f'{corrected} rooms corrected', 'corrected': corrected})
