import json
import logging
from functools import wraps

from django.core.exceptions import ValidationError
from django.http import JsonResponse

from moneybook.errors import MoneybookError

logger = logging.getLogger(__name__)


def read_payload(request):
    """
    Request body as a dict: JSON when the client sends JSON, form data otherwise.
    """
    if request.content_type == "application/json":
        try:
            payload = json.loads(request.body or b"{}")
        except json.JSONDecodeError:
            raise ValidationError("Request body is not valid JSON.") from None
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object.")
        return payload
    return request.POST


def validation_error_body(exc):
    fields = exc.message_dict if hasattr(exc, "error_dict") else {"__all__": exc.messages}
    first = next((messages[0] for messages in fields.values() if messages), "Invalid input.")
    return {"code": "VALIDATION_ERROR", "message": first, "fields": fields}


def api_endpoint(view):
    """
    Turn domain and validation errors raised by ``view`` into JSON error responses.
    """

    @wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except MoneybookError as exc:
            logger.info("%s %s -> %s: %s", request.method, request.path, exc.code, exc.message)
            return JsonResponse({"error": exc.as_dict()}, status=exc.status)
        except ValidationError as exc:
            body = validation_error_body(exc)
            logger.info("%s %s -> invalid input: %s", request.method, request.path, body["fields"])
            return JsonResponse({"error": body}, status=400)

    return wrapper


def mutation_response(request, payload, event, status=200):
    """
    JSON response for a write. HTMX callers also get a refresh event for ``event``.
    """
    response = JsonResponse(payload, status=status)
    if getattr(request, "htmx", False):
        response["HX-Trigger"] = json.dumps({f"{event}:refresh": True})
    return response
