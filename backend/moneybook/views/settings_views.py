from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from moneybook.forms import SettingsUpdateForm, clean_payload
from moneybook.serializers import serialize_settings
from moneybook.services.settings import get_settings, update_settings

from .utils import api_endpoint, mutation_response, read_payload


@require_GET
@api_endpoint
def settings_detail(request):
    return JsonResponse(serialize_settings(get_settings()))


@require_POST
@api_endpoint
def settings_update(request):
    form = clean_payload(SettingsUpdateForm, read_payload(request))
    return mutation_response(request, serialize_settings(update_settings(form.changes())), "settings")
