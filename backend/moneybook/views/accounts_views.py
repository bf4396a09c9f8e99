from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from moneybook.forms import (
    AccountBalanceForm,
    AccountCreateForm,
    AccountListForm,
    AccountUpdateForm,
    clean_payload,
)
from moneybook.serializers import serialize_account
from moneybook.services import accounts

from .utils import api_endpoint, mutation_response, read_payload


@require_GET
@api_endpoint
def account_list(request):
    form = clean_payload(AccountListForm, request.GET)
    rows = accounts.list_accounts(**form.filters())
    return JsonResponse({"results": [serialize_account(row) for row in rows]})


@require_GET
@api_endpoint
def account_detail(request, pk):
    return JsonResponse(serialize_account(accounts.get_account(pk)))


@require_GET
@api_endpoint
def account_default_currency(request):
    currency_id = accounts.get_default_currency_id()
    return JsonResponse({"currency_id": str(currency_id) if currency_id else None})


@require_GET
@api_endpoint
def account_deletable(request, pk):
    return JsonResponse(accounts.check_account_deletable(pk))


@require_POST
@api_endpoint
def account_create(request):
    form = clean_payload(AccountCreateForm, read_payload(request))
    account = accounts.create_account(**form.cleaned_data)
    return mutation_response(request, serialize_account(account), "accounts", status=201)


@require_POST
@api_endpoint
def account_update(request, pk):
    form = clean_payload(AccountUpdateForm, read_payload(request))
    account = accounts.update_account(pk, form.changes())
    return mutation_response(request, serialize_account(account), "accounts")


@require_POST
@api_endpoint
def account_balance(request, pk):
    form = clean_payload(AccountBalanceForm, read_payload(request))
    account = accounts.update_account_balance(pk, form.cleaned_data["balance"])
    return mutation_response(request, serialize_account(account), "accounts")


@require_POST
@api_endpoint
def account_archive(request, pk):
    return mutation_response(request, serialize_account(accounts.archive_account(pk)), "accounts")


@require_POST
@api_endpoint
def account_unarchive(request, pk):
    return mutation_response(request, serialize_account(accounts.unarchive_account(pk)), "accounts")
