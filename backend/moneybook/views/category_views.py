from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from moneybook.forms import CategoryCreateForm, CategoryListForm, CategoryUpdateForm, clean_payload
from moneybook.serializers import serialize_category
from moneybook.services import categories

from .utils import api_endpoint, mutation_response, read_payload


@require_GET
@api_endpoint
def category_list(request):
    form = clean_payload(CategoryListForm, request.GET)
    rows = categories.list_categories(**form.filters())
    return JsonResponse({"results": [serialize_category(row) for row in rows]})


@require_GET
@api_endpoint
def category_detail(request, pk):
    return JsonResponse(serialize_category(categories.get_category(pk)))


@require_GET
@api_endpoint
def category_deletable(request, pk):
    return JsonResponse(categories.check_category_deletable(pk))


@require_POST
@api_endpoint
def category_create(request):
    form = clean_payload(CategoryCreateForm, read_payload(request))
    category = categories.create_category(**form.cleaned_data)
    return mutation_response(request, serialize_category(category), "categories", status=201)


@require_POST
@api_endpoint
def category_update(request, pk):
    form = clean_payload(CategoryUpdateForm, read_payload(request))
    category = categories.update_category(pk, form.changes())
    return mutation_response(request, serialize_category(category), "categories")


@require_POST
@api_endpoint
def category_archive(request, pk):
    return mutation_response(request, serialize_category(categories.archive_category(pk)), "categories")


@require_POST
@api_endpoint
def category_unarchive(request, pk):
    return mutation_response(request, serialize_category(categories.unarchive_category(pk)), "categories")
