"""
Health check endpoints

- Liveness (is the app running?)
- Readiness (can the app reach its database?)
- Deep check (database latency and occupancy / billing counts)
"""

import time
import logging
from django.http import JsonResponse
from django.db import connection
from django.db.models import Sum
from django.views.decorators.http import require_GET
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)


def _database_latency_ms():
    start = time.time()
    with connection.cursor() as cursor:
        cursor.execute('SELECT 1')
        cursor.fetchone()
    return round((time.time() - start) * 1000, 2)


@csrf_exempt
@require_GET
def health_check(request):
    """
    Basic health check - returns 200 if app is running.
    Used by load balancers and container orchestration.
    """
    return JsonResponse({
        'status': 'healthy',
        'timestamp': time.time(),
    })


@csrf_exempt
@require_GET
def readiness_check(request):
    """Readiness check - 503 when the database is unreachable"""
    try:
        _database_latency_ms()
        ready = True
        error = None
    except Exception as e:
        ready = False
        error = f'Database: {str(e)}'
        logger.error(f'Health check - Database error: {e}')

    return JsonResponse({
        'status': 'ready' if ready else 'not_ready',
        'timestamp': time.time(),
        'checks': {'database': ready},
        'errors': [error] if error else None,
    }, status=200 if ready else 503)


@csrf_exempt
@require_GET
def deep_health_check(request):
    """
    Deep health check - database latency plus room, tenant and bill counts.
    Use sparingly as it may be resource intensive.
    """
    from rooms.models import Room
    from tenants.models import Tenant
    from billing.models import Bill
    from core.constants import BillStatus

    checks = {
        'database': {'status': False, 'latency_ms': None},
        'models': {'status': False, 'details': {}},
    }
    errors = []

    try:
        checks['database'] = {'status': True, 'latency_ms': _database_latency_ms()}
    except Exception as e:
        errors.append(f'Database: {str(e)}')
        logger.error(f'Deep health check - Database error: {e}')

    try:
        rooms = Room.objects.aggregate(beds_taken=Sum('occupant_count'))
        checks['models'] = {'status': True, 'details': {
            'rooms': Room.objects.count(),
            'beds_taken': rooms['beds_taken'] or 0,
            'tenants': Tenant.objects.count(),
            'unpaid_bills': Bill.objects.filter(status=BillStatus.UNPAID).count(),
        }}
    except Exception as e:
        errors.append(f'Models: {str(e)}')
        logger.error(f'Deep health check - Model error: {e}')

    all_healthy = checks['database']['status'] and checks['models']['status']
    return JsonResponse({
        'status': 'healthy' if all_healthy else 'unhealthy',
        'timestamp': time.time(),
        'checks': checks,
        'errors': errors if errors else None,
    }, status=200 if all_healthy else 503)


def get_health_urls():
    """
    Returns URL patterns for health endpoints.
    """
    from django.urls import path

    return [
        path('health/', health_check, name='health_check'),
        path('health/ready/', readiness_check, name='readiness_check'),
        path('health/deep/', deep_health_check, name='deep_health_check'),
    ]
