"""Page-number pagination rendered inside the response envelope."""

from __future__ import annotations

import math

from django.core.paginator import EmptyPage, InvalidPage, Page  # type: ignore
from rest_framework.exceptions import NotFound  # type: ignore
from rest_framework.pagination import PageNumberPagination  # type: ignore

from .responses import envelope


class EnvelopePagination(PageNumberPagination):
    """``?page=&limit=`` pagination returning ``{<results_key>, pagination}``."""

    page_size = 10
    page_size_query_param = "limit"
    max_page_size = 100
    results_key = "results"
    message = "Records retrieved successfully"

    def paginate_queryset(self, queryset, request, view=None):  # type: ignore
        """Like DRF's, but a page past the end is empty instead of a 404."""

        self.request = request
        page_size = self.get_page_size(request)
        if not page_size:
            return None

        paginator = self.django_paginator_class(queryset, page_size)
        page_number = self.get_page_number(request, paginator)
        try:
            self.page = paginator.page(page_number)
        except EmptyPage:
            # Totals still describe the whole result set.
            self.page = Page([], int(page_number), paginator)
        except InvalidPage as exc:
            raise NotFound(
                self.invalid_page_message.format(page_number=page_number, message=str(exc))
            )
        return list(self.page)

    def get_paginated_response(self, data):  # type: ignore
        total = self.page.paginator.count
        limit = self.page.paginator.per_page
        return envelope(
            {
                self.results_key: data,
                "pagination": {
                    "page": self.page.number,
                    "limit": limit,
                    "total": total,
                    "totalPages": math.ceil(total / limit) if limit else 0,
                },
            },
            self.message,
        )

    def get_paginated_response_schema(self, schema):  # type: ignore
        return {
            "type": "object",
            "properties": {
                "success": {"type": "boolean"},
                "message": {"type": "string"},
                "data": {
                    "type": "object",
                    "properties": {
                        self.results_key: schema,
                        "pagination": {
                            "type": "object",
                            "properties": {
                                "page": {"type": "integer"},
                                "limit": {"type": "integer"},
                                "total": {"type": "integer"},
                                "totalPages": {"type": "integer"},
                            },
                        },
                    },
                },
            },
        }
