import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from modules.core.exceptions import StoreError
from modules.core.store import connect_store

logger = structlog.get_logger()


@require_GET
def health_check(request: HttpRequest) -> JsonResponse:
    """Report whether the product store answers."""
    try:
        elapsed = connect_store().ping()
        store = {"status": "up", "response_time_ms": elapsed}
        healthy = True
    except StoreError:
        store = {"status": "down"}
        healthy = False
        logger.error("health_check_store_failure", exc_info=True)

    logger.info("health_check_completed", status="healthy" if healthy else "unhealthy")

    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": {"store": store},
        },
        status=200 if healthy else 503,
    )
