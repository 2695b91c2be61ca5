from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from .models import Bill
from .serializers import BillSerializer, ElectricityBillSerializer, GenerateRentSerializer
from .repositories import BillRepository
from .services import BillingService
from api.permissions import IsAdminOrTenant, IsPGAdmin, IsTenant, is_pg_admin, get_tenant


class BillViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for Bills
    Admin sees all bills, tenants only their own
    """
    permission_classes = [IsAuthenticated, IsAdminOrTenant]
    serializer_class = BillSerializer
    search_fields = ['tenant__name', 'room_no']
    ordering_fields = ['created_at', 'due_date', 'amount']
    ordering = ['-created_at']

    def get_permissions(self):
        if self.action in ('electricity', 'generate'):
            return [IsAuthenticated(), IsPGAdmin()]
        if self.action == 'my_bills':
            return [IsAuthenticated(), IsTenant()]
        return super().get_permissions()

    def get_queryset(self):
        queryset = Bill.objects.select_related('tenant')

        if not is_pg_admin(self.request.user):
            tenant = get_tenant(self.request.user)
            return queryset.filter(tenant=tenant) if tenant else queryset.none()

        for param in ('month', 'type', 'status', 'room_no'):
            value = self.request.query_params.get(param, None)
            if value:
                queryset = queryset.filter(**{param: value})

        year = self.request.query_params.get('year', None)
        if year and year.isdigit():
            queryset = queryset.filter(year=int(year))

        return queryset

    @action(detail=False, methods=['get'], url_path='my-bills')
    def my_bills(self, request):
        """Bills of the logged-in tenant, newest first"""
        bills = BillRepository().for_tenant(get_tenant(request.user).pk)
        serializer = self.get_serializer(bills, many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['post'])
    def electricity(self, request):
        """Split an electricity bill across the selected tenants"""
        serializer = ElectricityBillSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        bills = BillingService().create_electricity_split(
            data['amount'], data['tenant_ids'], month=data.get('month') or None, year=data.get('year')
        )
        return Response(
            {
                'detail': 'Electricity bills created',
                'count': len(bills),
                'bills': BillSerializer(bills, many=True).data,
            },
            status=status.HTTP_201_CREATED
        )

    @action(detail=False, methods=['post'])
    def generate(self, request):
        """Run monthly rent generation now (same as the scheduled job)"""
        serializer = GenerateRentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = BillingService().generate_monthly_rent(as_of=serializer.validated_data.get('date'))
        return Response({
            'month': result.month,
            'year': result.year,
            'created': result.created_count,
            'skipped': result.skipped,
        })
