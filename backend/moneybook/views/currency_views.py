from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from moneybook.forms import CurrencyCreateForm, CurrencyListForm, CurrencyUpdateForm, ExchangeRateForm, clean_payload
from moneybook.serializers import serialize_currency
from moneybook.services import currencies

from .utils import api_endpoint, mutation_response, read_payload


@require_GET
@api_endpoint
def currency_list(request):
    form = clean_payload(CurrencyListForm, request.GET)
    rows = currencies.list_currencies(include_archived=form.cleaned_data["include_archived"])
    return JsonResponse({"results": [serialize_currency(row) for row in rows]})


@require_GET
@api_endpoint
def currency_detail(request, pk):
    return JsonResponse(serialize_currency(currencies.get_currency(pk)))


@require_GET
@api_endpoint
def currency_default(request):
    return JsonResponse(serialize_currency(currencies.get_default_currency()))


@require_POST
@api_endpoint
def currency_create(request):
    form = clean_payload(CurrencyCreateForm, read_payload(request))
    currency = currencies.create_currency(**form.cleaned_data)
    return mutation_response(request, serialize_currency(currency), "currencies", status=201)


@require_POST
@api_endpoint
def currency_update(request, pk):
    form = clean_payload(CurrencyUpdateForm, read_payload(request))
    currency = currencies.update_currency(pk, form.changes())
    return mutation_response(request, serialize_currency(currency), "currencies")


@require_POST
@api_endpoint
def currency_exchange_rate(request, pk):
    form = clean_payload(ExchangeRateForm, read_payload(request))
    currency = currencies.update_exchange_rate(pk, form.cleaned_data["exchange_rate"])
    return mutation_response(request, serialize_currency(currency), "currencies")


@require_POST
@api_endpoint
def currency_archive(request, pk):
    return mutation_response(request, serialize_currency(currencies.archive_currency(pk)), "currencies")


@require_POST
@api_endpoint
def currency_unarchive(request, pk):
    return mutation_response(request, serialize_currency(currencies.unarchive_currency(pk)), "currencies")
