from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from moneybook.forms import PayeeCreateForm, PayeeListForm, PayeeUpdateForm, clean_payload
from moneybook.serializers import serialize_payee
from moneybook.services import payees

from .utils import api_endpoint, mutation_response, read_payload


@require_GET
@api_endpoint
def payee_list(request):
    form = clean_payload(PayeeListForm, request.GET)
    rows = payees.list_payees(**form.filters())
    return JsonResponse({"results": [serialize_payee(row) for row in rows]})


@require_GET
@api_endpoint
def payee_detail(request, pk):
    return JsonResponse(serialize_payee(payees.get_payee(pk)))


@require_POST
@api_endpoint
def payee_create(request):
    form = clean_payload(PayeeCreateForm, read_payload(request))
    payee = payees.create_payee(**form.cleaned_data)
    return mutation_response(request, serialize_payee(payee), "payees", status=201)


@require_POST
@api_endpoint
def payee_update(request, pk):
    form = clean_payload(PayeeUpdateForm, read_payload(request))
    payee = payees.update_payee(pk, form.changes())
    return mutation_response(request, serialize_payee(payee), "payees")


@require_POST
@api_endpoint
def payee_archive(request, pk):
    return mutation_response(request, serialize_payee(payees.archive_payee(pk)), "payees")


@require_POST
@api_endpoint
def payee_unarchive(request, pk):
    return mutation_response(request, serialize_payee(payees.unarchive_payee(pk)), "payees")


@require_POST
@api_endpoint
def payee_delete(request, pk):
    outcome = payees.delete_payee(pk)
    response = mutation_response(request, outcome.as_dict(), "payees")
    response["X-Payee-Action"] = "deleted" if outcome.deleted else "archived"
    return response
