"""Health check and fallback error views."""

import structlog
from django.db import connection
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from django.utils import timezone

logger = structlog.get_logger(__name__)


@csrf_exempt
@require_http_methods(["GET"])
def healthz(request):
    """Health check endpoint for load balancers and containers"""
    try:
        # Check database connectivity
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except Exception as exc:  # pragma: no cover - depends on a broken database
        logger.error("healthz.fail", error=str(exc))
        return JsonResponse(
            {"success": False, "message": "Database unavailable", "code": "SERVICE_UNAVAILABLE"},
            status=503,
        )
    return JsonResponse(
        {
            "success": True,
            "message": "Server is running",
            "data": {"database": "connected", "timestamp": timezone.now().isoformat()},
        },
        status=200,
    )


def route_not_found(request, exception=None):
    return JsonResponse(
        {"success": False, "message": "Route not found", "code": "ROUTE_NOT_FOUND"},
        status=404,
    )


def server_error(request):
    return JsonResponse(
        {"success": False, "message": "Internal server error", "code": "INTERNAL_ERROR"},
        status=500,
    )
