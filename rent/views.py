from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.utils import timezone
from core.constants import MONTHS
from core.validators import PeriodValidator
from .models import RentProof
from .reports import RentReportMerger
from .serializers import RentProofSerializer, RentProofReviewSerializer, ReportRowSerializer
from .services import RentProofService
from .utils import export_rent_report
from api.permissions import IsAdminOrTenant, IsPGAdmin, IsTenant, is_pg_admin, get_tenant


class RentProofViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for manual rent proofs and the rent tracking report
    Tenants submit and see their own proofs, the admin reviews them
    """
    permission_classes = [IsAuthenticated, IsAdminOrTenant]
    serializer_class = RentProofSerializer

    def get_permissions(self):
        if self.action in ('review', 'track', 'track_export'):
            return [IsAuthenticated(), IsPGAdmin()]
        if self.action == 'create':
            return [IsAuthenticated(), IsTenant()]
        return super().get_permissions()

    def get_queryset(self):
        queryset = RentProof.objects.select_related('tenant').order_by('-created_at')

        if not is_pg_admin(self.request.user):
            tenant = get_tenant(self.request.user)
            return queryset.filter(tenant=tenant) if tenant else queryset.none()

        for param in ('month', 'status'):
            value = self.request.query_params.get(param, None)
            if value:
                queryset = queryset.filter(**{param: value})

        year = self.request.query_params.get('year', None)
        if year and year.isdigit():
            queryset = queryset.filter(year=int(year))

        return queryset

    def create(self, request, *args, **kwargs):
        """Tenant submits a manual payment proof"""
        proof = RentProofService().submit(
            get_tenant(request.user),
            request.data.get('month'),
            request.data.get('year'),
            request.data.get('amount'),
            request.data.get('proof_url') or request.data.get('payment_proof'),
        )
        serializer = self.get_serializer(proof)
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['patch', 'post'])
    def review(self, request, pk=None):
        """Approve or reject a proof"""
        serializer = RentProofReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        proof = RentProofService().review(pk, serializer.validated_data['status'])
        return Response(RentProofSerializer(proof).data)

    @action(detail=False, methods=['get'])
    def track(self, request):
        """Payment state of every tenant for ?month=&year= (defaults to the current month)"""
        month, year = self._period(request)
        rows = RentReportMerger().build(month, year)
        return Response({
            'month': month,
            'year': year,
            'count': len(rows),
            'results': ReportRowSerializer([row.as_dict() for row in rows], many=True).data,
        })

    @action(detail=False, methods=['get'], url_path='track/export')
    def track_export(self, request):
        """Same report as track, as a CSV download"""
        month, year = self._period(request)
        rows = RentReportMerger().build(month, year)
        return export_rent_report(rows, month, year)

    @staticmethod
    def _period(request):
        today = timezone.localdate()
        month = request.query_params.get('month') or MONTHS[today.month - 1]
        year = request.query_params.get('year') or today.year
        return PeriodValidator.validate_period(month, year)
