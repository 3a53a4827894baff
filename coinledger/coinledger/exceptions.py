import logging

from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Render every API error as {"error": ..., "code": ...}.

    Serializer failures carrying several messages keep them under "errors".
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and set(data) == {"detail"}:
        detail = data["detail"]
        payload = {"error": str(detail), "code": getattr(detail, "code", "error")}
    elif isinstance(data, list) and len(data) == 1:
        payload = {"error": str(data[0]), "code": getattr(data[0], "code", "invalid")}
    else:
        payload = {"error": "Validation error", "code": "invalid", "errors": data}
    response.data = payload

    view = context.get("view")
    logger.warning(f"{type(view).__name__} -> {response.status_code}: {payload['error']}")
    return response
