import logging
import time

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from moneybook.models import Account, AppSettings, Category, Currency, Payee

logger = logging.getLogger(__name__)

SLOW_DATABASE_MS = 100


def _database_check():
    started = time.perf_counter()
    connection.ensure_connection()
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return round((time.perf_counter() - started) * 1000, 2)


def _record_counts():
    return {
        "currencies": Currency.objects.count(),
        "categories": Category.objects.count(),
        "accounts": Account.objects.count(),
        "payees": Payee.objects.count(),
        "settings": AppSettings.objects.count(),
    }


@require_GET
def health(request):
    """
    Liveness and database status. ``?details=1`` adds record counts and
    ``?message=...`` is echoed back.
    """
    payload = {"timestamp": timezone.now().isoformat()}
    try:
        latency = _database_check()
    except DatabaseError as exc:
        logger.error("Health check failed: %s", exc)
        payload.update({"status": "unhealthy", "database": {"connected": False, "error": str(exc)}})
        return JsonResponse(payload, status=503)

    payload["status"] = "degraded" if latency > SLOW_DATABASE_MS else "healthy"
    payload["database"] = {"connected": True, "latency_ms": latency}
    if request.GET.get("details") in ("1", "true", "yes"):
        payload["records"] = _record_counts()
    if request.GET.get("message"):
        payload["message"] = request.GET["message"]
    if payload["status"] == "degraded":
        logger.warning("Database latency %.2fms above %dms", latency, SLOW_DATABASE_MS)
    return JsonResponse(payload)
