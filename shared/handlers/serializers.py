"""Serializers for list query parameters, toggles and pages."""

from rest_framework import serializers
from rest_framework.request import Request

from shared.domain import FIRST_PAGE, PAGE_SIZES, ListQuery, Page


class ListQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True, default="")
    page = serializers.IntegerField(required=False, min_value=FIRST_PAGE, default=FIRST_PAGE)
    page_size = serializers.ChoiceField(choices=PAGE_SIZES, required=False, default=PAGE_SIZES[0])


def parse_list_query(request: Request, filter_names: tuple[str, ...]) -> ListQuery:
    serializer = ListQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    filters = {
        name: request.query_params[name] for name in filter_names if name in request.query_params
    }
    return ListQuery.build(filters=filters, **serializer.validated_data)


class ToggleSerializer(serializers.Serializer):
    """The value the admin saw before clicking the switch."""

    current = serializers.BooleanField(required=True)


def page_payload(page: Page, serializer_class: type[serializers.BaseSerializer]) -> dict:
    return {
        "rows": list(serializer_class(page.rows, many=True).data),
        "total_count": page.total_count,
        "page": page.page,
        "page_size": page.page_size,
        "total_pages": page.total_pages,
    }


class StatusSerializer(serializers.Serializer):
    status = serializers.CharField()
